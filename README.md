# kernelsim

Pieces of a small simulated operating system split into cooperating
processes (a kernel, a CPU, an I/O device and a memory server) and the
compact length-prefixed TCP protocol they use to talk to each other.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

| Command                     | What it does                                                    |
|-----------------------------|-----------------------------------------------------------------|
| `kernelsim-kernel [CONFIG]` | Loads the kernel configuration (default `kernel.config` in the current directory) and reads the kernel settings from it. |
| `kernelsim-cpu`             | Prints `Hola desde cpu!!`.                                      |
| `kernelsim-io`              | Prints `Hola desde io!!`.                                       |
| `kernelsim-memoria`         | Prints `Hola desde memoria!!`.                                  |

### Kernel configuration

The kernel configuration is a plain `KEY=VALUE` file. Empty lines and
lines starting with `#` are ignored:

```
IP_MEMORIA=127.0.0.1
PUERTO_MEMORIA=8002
PUERTO_ESCUCHA_DISPATCH=8001
PUERTO_ESCUCHA_INTERRUPT=8004
PUERTO_ESCUCHA_IO=8003
ALGORITMO_PLANIFICACION=FIFO
TIEMPO_SUSPENSION=4500
LOG_LEVEL=INFO
```

If the file cannot be read, the command prints `No se puede crear la
config` and exits with status 1. A missing key raises `KeyError`.

## Using the library

### Wire protocol (`kernelsim.shared`)

Every integer on the wire is a 4-byte little-endian signed int. A frame
is an operation code, a payload size and the payload. Operation codes
are in `OpCode`: `MESSAGE` (0), `PACKET` (1) and `HANDSHAKE` (2).

```python
from kernelsim.shared import Packet, send_packet, send_message

packet = Packet()               # op code PACKET, empty buffer
packet.add(b"hello")            # each value is stored with its length
packet.add(b"world")
frame = packet.serialize()      # bytes ready for the socket

send_packet(packet, sock)       # same frame, written to a socket
send_message("hi there", sock)  # a MESSAGE frame holding a NUL-terminated UTF-8 string
```

On the receiving side:

```python
from kernelsim.shared import OpCode, receive_operation, receive_packet, receive_message

op = receive_operation(sock)
if op == OpCode.PACKET:
    values = receive_packet(sock)           # list of bytes, one per added value
elif op == OpCode.MESSAGE:
    text = receive_message(sock, logger)    # logged as "Me llego el mensaje: ..."
```

`receive_operation` returns an `OpCode`, or the plain integer for an
unknown code. When the peer has gone away it closes the socket and
raises `ConnectionClosedError`. `receive_buffer` reads one size-prefixed
buffer; malformed packet contents raise `ValueError`.

`greet(who)` prints a greeting, `release_connection(sock)` closes a
socket, and `terminate_program(connection, logger, config)` closes the
logger's handlers and clears the configuration's values.

### Connections and handshake (`kernelsim.connections`)

```python
from kernelsim.connections import (
    create_connection, generate_handshake,
    start_server, wait_client, receive_handshake,
)

server = start_server(8001, logger)          # listening IPv4 socket
client = create_connection("127.0.0.1", 8001)
peer = wait_client(server)

# generate_handshake blocks until the answer arrives, so the two sides
# run in different threads or processes:
generate_handshake(client)   # True when the peer answered success
receive_handshake(peer)      # answers the request; True when it was valid
```

Socket failures are raised as `OSError`; `start_server` logs an error
before re-raising.

### Configuration and logging (`kernelsim.configs`)

```python
from kernelsim.configs import load_config, start_config, start_logger

config = load_config("kernel.config")    # raises ConfigError if unreadable
config = start_config("kernel.config")   # exits with status 1 instead
config.get_string("IP_MEMORIA")
config.get_int("PUERTO_MEMORIA")         # leading integer of the value, 0 if none
config.has("LOG_LEVEL")
logger = start_logger("kernel.log", "kernel")
```

`start_logger` returns an INFO-level `logging.Logger` that writes to the
given file and to standard output and logs `<name> iniciado`.

### Kernel (`kernelsim.kernel`)

`read_kernel_config(config)` turns a `Config` into a frozen
`KernelConfig` (`memory_ip`, `memory_port`, `dispatch_port`,
`interrupt_port`, `io_port`, `scheduling_algorithm`, `suspension_time`,
`log_level`). `PCB` is a process control block with `pid`, `pc` and two
six-entry tables `me` and `mt`; other table lengths raise `ValueError`.

## What this package does not do

The processes are only started, not run: the kernel reads its settings
but does not schedule processes or open its listening ports, and the
CPU, I/O and memory commands only print a greeting. Nothing executes
instructions, manages memory or performs I/O. The library pieces above
(protocol, connections, handshake, configuration) are what there is to
build those on.