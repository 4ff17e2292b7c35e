"""The ``gcpconf`` command group.

Global options are handled here before any subcommand runs: the services
factory passed as ``obj`` is called, the configuration for ``--profile`` is
read, ``--set`` overrides are layered on top and logging is started.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from gcpconf import __init__conf__
from gcpconf.adapters.config.overrides import apply_overrides

from .commands import cli_catalog, cli_config, cli_info, cli_resolve
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from gcpconf.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, metavar="NAME", help="Read the configuration layers of profile NAME")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. provider.region=us-east1 (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()

    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param_hint="'--profile'") from exc
    try:
        config = apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param_hint="'--set'") from exc

    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_config, cli_resolve, cli_catalog):
    cli.add_command(_command)


__all__ = ["cli"]
