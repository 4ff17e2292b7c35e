"""``gcpconf info``: package metadata plus the process-wide resolver defaults."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from gcpconf import __init__conf__
from gcpconf.application.assembler import build_user_agent
from gcpconf.domain.universe import DEFAULT_UNIVERSE_DOMAIN

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print installation metadata and the defaults every resolution starts from."""
    services = get_cli_context(ctx).services
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        endpoints = services.default_endpoints()
        click.echo("")
        click.echo(f"    user_agent        = {build_user_agent(services.lookup_env)}")
        click.echo(f"    universe_domain   = {DEFAULT_UNIVERSE_DOMAIN}")
        click.echo(f"    default_endpoints = {len(endpoints)} services")


__all__ = ["cli_info"]
