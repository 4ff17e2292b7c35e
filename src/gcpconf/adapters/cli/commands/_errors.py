"""Translate configuration failures into exit codes.

Exception priority, most specific first:

1. pydantic ``ValidationError`` -> CONFIG_ERROR (78): schema violations
2. ``ConfigurationError`` -> CONFIG_ERROR (78): resolution failures
3. ``DuplicateOperationError`` -> CONFIG_ERROR (78): strict catalog collisions
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import rich_click as click
from pydantic import ValidationError

from gcpconf.domain.errors import ConfigurationError, DuplicateOperationError

from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def format_validation_error(exc: ValidationError) -> list[str]:
    """Render each schema violation as ``provider.<field>: <message>``."""
    lines: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        lines.append(f"  provider.{location}: {error['msg']}" if location else f"  provider: {error['msg']}")
    return lines


def _fail(log_message: str, user_lines: list[str], exc: Exception) -> None:
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    for line in user_lines:
        click.echo(line, err=True)
    raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@contextmanager
def configuration_errors(command: str) -> Iterator[None]:
    """Turn configuration failures raised inside the block into ``SystemExit(78)``."""
    try:
        yield
    except ValidationError as exc:
        _fail(
            f"{command}: invalid provider settings",
            ["Error: invalid provider settings", *format_validation_error(exc)],
            exc,
        )
    except ConfigurationError as exc:
        _fail(f"{command}: configuration failed", [f"Error: {exc}"], exc)
    except DuplicateOperationError as exc:
        _fail(f"{command}: operation catalog has duplicates", [f"Error: {exc}"], exc)


__all__ = ["configuration_errors", "format_validation_error"]
