"""Kernel process: its process control block and startup configuration."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from kernelsim.configs import Config, start_config

DEFAULT_CONFIG_PATH = "kernel.config"
_REGISTER_COUNT = 6


def _registers() -> list[int]:
    return [0] * _REGISTER_COUNT


@dataclass
class PCB:
    """Process control block: id, program counter and two metric tables."""

    pid: int = 0
    pc: int = 0
    me: list[int] = field(default_factory=_registers)
    mt: list[int] = field(default_factory=_registers)

    def __post_init__(self) -> None:
        for name in ("me", "mt"):
            table = getattr(self, name)
            if len(table) != _REGISTER_COUNT:
                raise ValueError(
                    f"{name} must hold {_REGISTER_COUNT} entries, got {len(table)}"
                )


@dataclass(frozen=True)
class KernelConfig:
    """Settings the kernel reads at startup."""

    memory_ip: str
    memory_port: int
    dispatch_port: int
    interrupt_port: int
    io_port: int
    scheduling_algorithm: str
    suspension_time: int
    log_level: str


def read_kernel_config(config: Config) -> KernelConfig:
    """Extract the kernel settings from a loaded configuration."""
    return KernelConfig(
        memory_ip=config.get_string("IP_MEMORIA"),
        memory_port=config.get_int("PUERTO_MEMORIA"),
        dispatch_port=config.get_int("PUERTO_ESCUCHA_DISPATCH"),
        interrupt_port=config.get_int("PUERTO_ESCUCHA_INTERRUPT"),
        io_port=config.get_int("PUERTO_ESCUCHA_IO"),
        scheduling_algorithm=config.get_string("ALGORITMO_PLANIFICACION"),
        suspension_time=config.get_int("TIEMPO_SUSPENSION"),
        log_level=config.get_string("LOG_LEVEL"),
    )


def main(argv=None) -> int:
    """Load the kernel configuration and read its settings."""
    parser = argparse.ArgumentParser(prog="kernel")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH)
    args = parser.parse_args(argv)
    read_kernel_config(start_config(args.config))
    return 0