"""Logging stand-in for tests that must not start the lib_log_rich runtime."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the configuration and leave logging untouched."""


__all__ = ["init_logging_in_memory"]
