"""The ``gcpconf`` command line.

``main`` runs the :data:`cli` group; tests drive the group directly with a
services factory as ``obj``. Commands: ``info``, ``config``, ``resolve`` and
``catalog``.
"""

from __future__ import annotations

from .commands import cli_catalog, cli_config, cli_info, cli_resolve
from .constants import CLICK_CONTEXT_SETTINGS, FORMAT_CHOICES, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "FORMAT_CHOICES",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_catalog",
    "cli_config",
    "cli_info",
    "cli_resolve",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
