"""Render layered configuration and resolved provider configuration.

Pending log output is flushed first so log lines never interleave with the
rendered configuration.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console
from rich.markup import escape

from gcpconf.domain.enums import OutputFormat
from gcpconf.domain.resolved import ResolvedConfiguration


def _flush_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Show the layered configuration with provenance comments.

    Raises:
        ValueError: If ``section`` does not exist.
    """
    _flush_logs()
    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


def _format_scalar(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return orjson.dumps(value).decode("utf-8")


def _human_lines(data: dict[str, Any], prefix: str = "") -> list[str]:
    """Flatten nested dicts into ``dotted.key = value`` lines.

    Example:
        >>> _human_lines({"auth": {"source": "ambient"}, "zone": ""})
        ['auth.source = "ambient"', 'zone = ""']
    """
    lines: list[str] = []
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict) and value:
            lines.extend(_human_lines(value, f"{name}."))
        else:
            lines.append(f"{name} = {_format_scalar(value)}")
    return lines


def display_resolved(
    resolved: ResolvedConfiguration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    console: Console | None = None,
) -> None:
    """Show a resolved configuration with every secret redacted.

    Args:
        resolved: Result of the configuration assembler.
        output_format: ``HUMAN`` prints ``key = value`` lines, ``JSON`` an indented document.
        console: Rich console to write to; defaults to stdout.
    """
    _flush_logs()
    data = resolved.to_display_dict()
    target = console if console is not None else Console()
    if output_format is OutputFormat.JSON:
        rendered = orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
        target.print(rendered, markup=False, highlight=False, soft_wrap=True)
        return
    target.print("[bold]Resolved provider configuration[/bold]")
    for line in _human_lines(data):
        target.print(escape(line), highlight=False, soft_wrap=True)


__all__ = ["display_config", "display_resolved"]
