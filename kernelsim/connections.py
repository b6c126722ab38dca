"""TCP client and server helpers plus the handshake exchange."""

from __future__ import annotations

import logging
import socket

from kernelsim.shared import _INT, OpCode, _recv_int

_HANDSHAKE_VALUE = 1
_HANDSHAKE_OK = 0
_HANDSHAKE_ERROR = -1


def create_connection(ip: str, port) -> socket.socket:
    """Connect to ``ip``:``port`` using the first address found."""
    family, socktype, proto, _, address = socket.getaddrinfo(
        ip, str(port), socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.connect(address)
    except OSError:
        sock.close()
        raise
    return sock


def generate_handshake(sock: socket.socket) -> bool:
    """Send a handshake request and tell whether the peer accepted it."""
    sock.sendall(_INT.pack(int(OpCode.HANDSHAKE)))
    sock.sendall(_INT.pack(_HANDSHAKE_VALUE))
    return _recv_int(sock) == _HANDSHAKE_OK


def start_server(port, logger: logging.Logger) -> socket.socket:
    """Open a listening IPv4 socket on ``port``."""
    try:
        family, socktype, proto, _, address = socket.getaddrinfo(
            None, str(port), socket.AF_INET, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )[0]
        server = socket.socket(family, socktype, proto)
    except OSError:
        logger.error("Hubo un error creando el file descriptor del servidor escucha")
        raise
    try:
        server.bind(address)
        server.listen(socket.SOMAXCONN)
    except OSError:
        server.close()
        logger.error("Hubo un error al intentar comenzar la escucha")
        raise
    print("[ INFO ]: << SERVIDOR LISTO Y ESCUCHANDO\t>>")
    return server


def wait_client(server: socket.socket) -> socket.socket:
    """Accept the next client connection."""
    client, _ = server.accept()
    return client


def receive_handshake(sock: socket.socket) -> bool:
    """Answer a handshake request; return whether it was valid."""
    accepted = _recv_int(sock) == _HANDSHAKE_VALUE
    sock.sendall(_INT.pack(_HANDSHAKE_OK if accepted else _HANDSHAKE_ERROR))
    return accepted