"""Process environment access and the cached default endpoint snapshot."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from functools import lru_cache

from gcpconf.application.endpoints import build_default_endpoints
from gcpconf.domain.credentials import env_lookup_from_mapping


def lookup_env(names: Sequence[str]) -> str:
    """Return the first non-empty value among ``names`` in ``os.environ``.

    Example:
        >>> lookup_env(["GCPCONF_SURELY_UNSET_VARIABLE"])
        ''
    """
    return env_lookup_from_mapping(os.environ)(names)


# Built once per process and shared read-only by every configure call.
@lru_cache(maxsize=1)
def default_endpoints() -> Mapping[str, str]:
    """Return the process-wide default endpoint snapshot.

    Example:
        >>> default_endpoints()["compute"].endswith("/compute/v1/")
        True
    """
    return build_default_endpoints(lookup_env)


__all__ = [
    "default_endpoints",
    "lookup_env",
]
