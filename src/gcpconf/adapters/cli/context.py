"""State passed from the root group to subcommands.

The root group resolves the services container, loads the layered
configuration and applies ``--set`` overrides exactly once. Subcommands read
the result through :func:`get_cli_context`; ``config --profile`` is the only
caller that asks for a second load via :meth:`CLIContext.config_for_profile`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from gcpconf.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from gcpconf.composition import AppServices


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags toggled by ``--traceback``."""

    enabled: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    services: AppServices
    config: Config
    traceback: bool = False
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration and profile name a subcommand should use.

        Without ``profile`` (or with the root profile) the already loaded
        configuration is returned. Otherwise the layers are read again for
        ``profile`` and the root ``--set`` overrides are reapplied.
        """
        if not profile or profile == self.profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    ctx.obj = CLIContext(
        services=services,
        config=config,
        traceback=traceback,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the :class:`CLIContext` stored on ``ctx`` or one of its parents.

    Raises:
        RuntimeError: When the root group has not run.
    """
    found = ctx.find_object(CLIContext)
    if found is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return found


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, colourised tracebacks on or off.

    Example:
        >>> previous = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> restore_traceback_state(previous)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
