"""Run the ``gcpconf`` command group and translate its outcome to an exit code.

Click runs with ``standalone_mode=False`` so the services factory can be
handed over as ``obj``; errors Click does not handle itself are reported by
lib_cli_exit_tools.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from gcpconf import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from gcpconf.composition import AppServices


def _report(exc: BaseException) -> int:
    """Print ``exc`` the lib_cli_exit_tools way and return its exit code.

    Must be called from inside the ``except`` block handling ``exc``.
    ``SystemExit`` carries its own message, if any, so nothing is printed.
    """
    if not isinstance(exc, SystemExit):
        verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # Worker threads share the runtime; only the main thread may stop it.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI with ``argv`` and return the process exit code.

    Args:
        argv: Arguments after the program name. ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were.
        services_factory: Builds the AppServices container, normally
            :func:`gcpconf.composition.build_production`.

    Raises:
        ValueError: When ``services_factory`` is omitted.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    from .root import cli

    args = sys.argv[1:] if argv is None else list(argv)
    saved = snapshot_traceback_state()
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
        return ExitCode.SUCCESS
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - reported and converted to an exit code
        return _report(exc)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
