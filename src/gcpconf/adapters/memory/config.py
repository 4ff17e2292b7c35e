"""In-memory configuration adapters for tests.

Satisfy the same protocols as the lib_layered_config backed adapters but
never read files.
"""

from __future__ import annotations

from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ...domain.resolved import ResolvedConfiguration


class InMemoryConfig:
    """Serve a fixed configuration dict through the GetConfig protocol.

    Example:
        >>> store = InMemoryConfig({"provider": {"project": "demo"}})
        >>> store.get_config()["provider"]["project"]
        'demo'
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = data or {}
        self.profiles: list[str | None] = []

    def get_config(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        self.profiles.append(profile)
        return Config(self.data, {})


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op; satisfies the DisplayConfig protocol."""


class ResolvedSpy:
    """Capture resolved configurations instead of printing them."""

    def __init__(self) -> None:
        self.shown: list[tuple[ResolvedConfiguration, OutputFormat]] = []

    def display_resolved(
        self, resolved: ResolvedConfiguration, *, output_format: OutputFormat = OutputFormat.HUMAN
    ) -> None:
        self.shown.append((resolved, output_format))


__all__ = [
    "InMemoryConfig",
    "ResolvedSpy",
    "display_config_in_memory",
    "get_config_in_memory",
]
