"""Packets, op codes and the length-prefixed wire protocol shared by every module."""

from __future__ import annotations

import logging
import socket
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kernelsim.configs import Config

# Every integer on the wire is a 4-byte little-endian signed int.
_INT = struct.Struct("<i")


class OpCode(IntEnum):
    """Operation codes that open every message on the wire."""

    MESSAGE = 0
    PACKET = 1
    HANDSHAKE = 2


class ConnectionClosedError(ConnectionError):
    """The peer closed the connection before sending what was expected."""


@dataclass
class Packet:
    """An operation code plus a buffer of size-prefixed values."""

    op_code: OpCode = OpCode.PACKET
    buffer: bytearray = field(default_factory=bytearray)

    def add(self, value) -> None:
        """Append a bytes-like value, preceded by its length."""
        data = memoryview(value).tobytes()
        self.buffer += _INT.pack(len(data))
        self.buffer += data

    def serialize(self) -> bytes:
        """Return op code, buffer size and buffer contents as wire bytes."""
        return _INT.pack(int(self.op_code)) + _INT.pack(len(self.buffer)) + bytes(self.buffer)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ConnectionClosedError."""
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            raise ConnectionClosedError(
                f"connection closed after {len(data)} of {size} bytes"
            )
        data += chunk
    return bytes(data)


def _recv_int(sock: socket.socket) -> int:
    return _INT.unpack(_recv_exact(sock, _INT.size))[0]


def greet(who: str) -> None:
    """Print a greeting naming the calling module."""
    print(f"Hola desde {who}!!")


def terminate_program(connection, logger: logging.Logger | None, config: Config | None) -> None:
    """Release the logger's handlers and the configuration's values."""
    if logger is not None:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
    if config is not None:
        config.values.clear()


def send_message(message: str, sock: socket.socket) -> None:
    """Send a text message, NUL-terminated, as a MESSAGE packet."""
    packet = Packet(OpCode.MESSAGE, bytearray(message.encode("utf-8") + b"\0"))
    sock.sendall(packet.serialize())


def send_packet(packet: Packet, sock: socket.socket) -> None:
    """Send a serialized packet."""
    sock.sendall(packet.serialize())


def release_connection(sock: socket.socket) -> None:
    """Close a connection."""
    sock.close()


def receive_operation(sock: socket.socket) -> OpCode | int:
    """Read the op code that opens a message; close the socket if the peer left."""
    try:
        value = _recv_int(sock)
    except ConnectionClosedError:
        sock.close()
        raise
    try:
        return OpCode(value)
    except ValueError:
        return value


def receive_buffer(sock: socket.socket) -> bytes:
    """Read a size-prefixed buffer."""
    size = _recv_int(sock)
    if size < 0:
        raise ValueError(f"negative buffer size {size}")
    return _recv_exact(sock, size)


def receive_message(sock: socket.socket, logger: logging.Logger) -> str:
    """Read a text message, log it and return it."""
    buffer = receive_buffer(sock)
    text = buffer.split(b"\0", 1)[0].decode("utf-8")
    logger.info("Me llego el mensaje: %s", text)
    return text


def receive_packet(sock: socket.socket) -> list[bytes]:
    """Read a packet buffer and split it into its values."""
    buffer = receive_buffer(sock)
    values: list[bytes] = []
    offset = 0
    while offset < len(buffer):
        if offset + _INT.size > len(buffer):
            raise ValueError("truncated value length in packet")
        (length,) = _INT.unpack_from(buffer, offset)
        offset += _INT.size
        if length < 0 or offset + length > len(buffer):
            raise ValueError("value length exceeds packet size")
        values.append(buffer[offset:offset + length])
        offset += length
    return values