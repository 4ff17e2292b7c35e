"""Operation catalog command.

Contents:
    * :func:`cli_catalog` - Merge the bundled registries and report collisions.
"""

from __future__ import annotations

import logging
from collections import Counter

import lib_log_rich.runtime
import rich_click as click

from gcpconf.adapters.catalog import bundled_sources
from gcpconf.application.catalog import assemble_catalog

from ..constants import CLICK_CONTEXT_SETTINGS
from ._errors import configuration_errors

logger = logging.getLogger(__name__)


@click.command("catalog", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--strict", is_flag=True, default=False, help="Exit with an error on duplicate operation names")
@click.option("--list", "list_operations", is_flag=True, default=False, help="Print every operation name")
def cli_catalog(strict: bool, list_operations: bool) -> None:
    """Merge the bundled operation registries and summarise the result.

    Duplicates are reported as a warning; ``--strict`` turns them into exit code 78.

    Example:
        >>> from click.testing import CliRunner
        >>> result = CliRunner().invoke(cli_catalog)
        >>> "operations" in result.output
        True
    """
    sources = bundled_sources()
    with lib_log_rich.runtime.bind(job_id="cli-catalog", extra={"command": "catalog", "strict": strict}):
        with configuration_errors("catalog"):
            result = assemble_catalog(sources, strict=strict)

        logger.info("Listing operation catalog", extra={"operations": len(result.operations)})
        origins = Counter(descriptor.origin for descriptor in result.operations.values())
        click.echo(f"{len(result.operations)} operations from {len(sources)} registries")
        for name, _ in sources:
            click.echo(f"  {name}: {origins.get(name, 0)}")
        if list_operations:
            for name in sorted(result.operations):
                descriptor = result.operations[name]
                click.echo(f"{name}\t{descriptor.kind}\t{descriptor.service}")
        if not result.ok:
            click.echo(f"Warning: duplicate operation name(s): {', '.join(result.duplicates)}", err=True)


__all__ = ["cli_catalog"]
