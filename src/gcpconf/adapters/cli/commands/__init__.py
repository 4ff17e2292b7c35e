"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config display from :mod:`.config`
    * Provider resolution from :mod:`.resolve_cmd`
    * Operation catalog from :mod:`.catalog_cmd`
"""

from __future__ import annotations

from .catalog_cmd import cli_catalog
from .config import cli_config
from .info import cli_info
from .resolve_cmd import cli_resolve

__all__ = [
    "cli_catalog",
    "cli_config",
    "cli_info",
    "cli_resolve",
]
