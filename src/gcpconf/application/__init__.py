"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.assembler` - Configuration assembly use case
    * :mod:`.catalog` - Operation catalog assembly
    * :mod:`.endpoints` - Process-wide default endpoint snapshot
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .assembler import assemble_configuration, build_user_agent
from .catalog import CatalogResult, assemble_catalog
from .endpoints import build_default_endpoints
from .ports import (
    DefaultEndpoints,
    DisplayConfig,
    DisplayResolved,
    GetConfig,
    InitLogging,
    LoadCredentials,
    LoadProviderSettings,
    LookupEnv,
)

__all__ = [
    "CatalogResult",
    "DefaultEndpoints",
    "DisplayConfig",
    "DisplayResolved",
    "GetConfig",
    "InitLogging",
    "LoadCredentials",
    "LoadProviderSettings",
    "LookupEnv",
    "assemble_catalog",
    "assemble_configuration",
    "build_default_endpoints",
    "build_user_agent",
]
