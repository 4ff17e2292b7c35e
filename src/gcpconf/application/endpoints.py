"""Build the process-wide default endpoint snapshot."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from ..domain.credentials import EnvLookup
from ..domain.endpoints import DEFAULT_BASE_PATHS, EndpointTable, mtls_endpoint

logger = logging.getLogger(__name__)

MTLS_ENV_VAR: Final[str] = "GOOGLE_API_USE_CLIENT_CERTIFICATE"


def uses_mtls(env: EnvLookup) -> bool:
    """Return True when the process is configured for client-certificate transport.

    Example:
        >>> uses_mtls(lambda names: "true")
        True
        >>> uses_mtls(lambda names: "")
        False
    """
    return env((MTLS_ENV_VAR,)).strip().lower() == "true"


def build_default_endpoints(env: EnvLookup, base_paths: Mapping[str, str] = DEFAULT_BASE_PATHS) -> Mapping[str, str]:
    """Return a read-only snapshot of the default base paths for this process.

    The mTLS rewrite is applied here, once, so the snapshot can be shared by
    every configure call without further mutation.

    Example:
        >>> snapshot = build_default_endpoints(lambda names: "true", {"svc": "https://svc.googleapis.com/v1/"})
        >>> snapshot["svc"]
        'https://svc.mtls.googleapis.com/v1/'
    """
    table = EndpointTable(base_paths)
    if uses_mtls(env):
        logger.info("Client certificate transport enabled, switching endpoints to mTLS")
        table.rewrite(mtls_endpoint)
    return table.snapshot()


__all__ = [
    "MTLS_ENV_VAR",
    "build_default_endpoints",
    "uses_mtls",
]
