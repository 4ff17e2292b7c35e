"""Resolve the ``[provider]`` section into the runtime configuration.

Contents:
    * :func:`cli_resolve` - Run configuration assembly and print the redacted result.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from gcpconf.adapters.catalog import bundled_sources
from gcpconf.application.assembler import assemble_configuration
from gcpconf.application.catalog import assemble_catalog
from gcpconf.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS, FORMAT_CHOICES
from ..context import get_cli_context
from ._errors import configuration_errors

logger = logging.getLogger(__name__)


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--strict-catalog",
    is_flag=True,
    default=False,
    help="Fail when the operation catalog declares a name twice",
)
@click.pass_context
def cli_resolve(ctx: click.Context, output_format: str, strict_catalog: bool) -> None:
    """Validate provider settings, load credentials and print the resolved configuration.

    Secrets are redacted. Configuration errors exit with code 78.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "resolve", "format": fmt.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-resolve", extra=extra), configuration_errors("resolve"):
        settings = services.load_provider_settings(cli_ctx.config.as_dict(), env=services.lookup_env)
        resolved = assemble_configuration(
            settings,
            env=services.lookup_env,
            load_credentials=services.load_credentials,
            default_endpoints=services.default_endpoints(),
        )
        catalog = assemble_catalog(bundled_sources(), strict=strict_catalog)
        logger.info("Resolved configuration ready", extra={"operations": len(catalog.operations)})
        services.display_resolved(resolved, output_format=fmt)


__all__ = ["cli_resolve"]
