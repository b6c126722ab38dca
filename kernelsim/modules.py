"""Entry points of the cpu, io and memoria processes."""

from __future__ import annotations

import argparse

from kernelsim.shared import greet


def _run(name: str, argv) -> int:
    argparse.ArgumentParser(prog=name).parse_args(argv)
    greet(name)
    return 0


def cpu_main(argv=None) -> int:
    """Start the cpu process."""
    return _run("cpu", argv)


def io_main(argv=None) -> int:
    """Start the io process."""
    return _run("io", argv)


def memoria_main(argv=None) -> int:
    """Start the memoria process."""
    return _run("memoria", argv)