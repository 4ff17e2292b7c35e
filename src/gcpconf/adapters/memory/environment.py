"""In-memory environment and endpoint adapters for tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ...domain.credentials import env_lookup_from_mapping
from ...domain.endpoints import DEFAULT_BASE_PATHS


class FakeEnvironment:
    """Environment lookup backed by a plain dict instead of ``os.environ``.

    Example:
        >>> env = FakeEnvironment({"GOOGLE_PROJECT": "demo"})
        >>> env.lookup_env(["GOOGLE_CLOUD_PROJECT", "GOOGLE_PROJECT"])
        'demo'
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def lookup_env(self, names: Sequence[str]) -> str:
        return env_lookup_from_mapping(self.values)(names)


def default_endpoints_in_memory() -> Mapping[str, str]:
    """Return the unmodified default base paths (no mTLS)."""
    return MappingProxyType(dict(DEFAULT_BASE_PATHS))


__all__ = [
    "FakeEnvironment",
    "default_endpoints_in_memory",
]
