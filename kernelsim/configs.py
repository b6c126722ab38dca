"""Key=value configuration files and process loggers."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConfigError(Exception):
    """A configuration file could not be loaded."""


@dataclass
class Config:
    """Values read from a configuration file."""

    values: dict[str, str] = field(default_factory=dict)
    path: str | None = None

    def get_string(self, key: str) -> str:
        """Return the value stored under ``key``."""
        try:
            return self.values[key]
        except KeyError:
            raise KeyError(f"missing configuration key {key!r}") from None

    def get_int(self, key: str) -> int:
        """Return the leading integer of the value, or 0 if it has none."""
        match = _LEADING_INT.match(self.get_string(key))
        return int(match.group(1)) if match else 0

    def has(self, key: str) -> bool:
        """Tell whether ``key`` is present."""
        return key in self.values


def _parse(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in text.split("\n"):
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            values[key] = value
    return values


def load_config(path) -> Config:
    """Read a configuration file; raise ConfigError if it cannot be read."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc
    return Config(_parse(text), str(path))


def start_config(path) -> Config:
    """Load a configuration, exiting with status 1 if that fails."""
    try:
        return load_config(path)
    except ConfigError:
        print("No se puede crear la config")
        raise SystemExit(1) from None


def start_logger(log_file, process_name: str) -> logging.Logger:
    """Create an INFO logger writing to ``log_file`` and the console."""
    logger = logging.getLogger(process_name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    formatter = logging.Formatter(
        "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"
    )
    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError:
        print("No se puede crear el logger")
        raise SystemExit(1) from None
    console_handler = logging.StreamHandler(sys.stdout)
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.info("%s iniciado", process_name)
    return logger