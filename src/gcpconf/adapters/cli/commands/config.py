"""``gcpconf config``: show the layered settings before they are resolved.

Useful for finding out which file or environment variable supplied a
``[provider]`` value; ``resolve`` shows what those values turn into.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from gcpconf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS, FORMAT_CHOICES
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
)
@click.option("--section", metavar="NAME", default=None, help="Limit output to one table, e.g. provider")
@click.option("--profile", metavar="NAME", default=None, help="Show profile NAME instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print every configuration value with the layer it came from.

    Layers, lowest first: bundled defaults, app, host, user, .env, environment,
    then ``--set``. An unknown ``--section`` exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = cli_ctx.config_for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": shown_profile}):
        logger.info("Displaying configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
