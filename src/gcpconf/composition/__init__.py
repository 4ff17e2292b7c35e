"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config, display_resolved
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_provider_settings
from ..adapters.credentials.loader import load_credentials
from ..adapters.environment import default_endpoints, lookup_env
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright checks each adapter against its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory import CredentialSpy, FakeEnvironment, InMemoryConfig, ResolvedSpy
    from ..application.ports import (
        DefaultEndpoints,
        DisplayConfig,
        DisplayResolved,
        GetConfig,
        InitLogging,
        LoadCredentials,
        LoadProviderSettings,
        LookupEnv,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_display_resolved: DisplayResolved = display_resolved
    _assert_init_logging: InitLogging = init_logging
    _assert_load_provider_settings: LoadProviderSettings = load_provider_settings
    _assert_load_credentials: LoadCredentials = load_credentials
    _assert_lookup_env: LookupEnv = lookup_env
    _assert_default_endpoints: DefaultEndpoints = default_endpoints


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    display_resolved: DisplayResolved
    init_logging: InitLogging
    load_provider_settings: LoadProviderSettings
    load_credentials: LoadCredentials
    lookup_env: LookupEnv
    default_endpoints: DefaultEndpoints


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        display_resolved=display_resolved,
        init_logging=init_logging,
        load_provider_settings=load_provider_settings,
        load_credentials=load_credentials,
        lookup_env=lookup_env,
        default_endpoints=default_endpoints,
    )


def build_testing(
    *,
    config: InMemoryConfig | None = None,
    credentials: CredentialSpy | None = None,
    environment: FakeEnvironment | None = None,
    resolved_spy: ResolvedSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Pass your own spies to assert on what the commands did; fresh ones are
    created otherwise.

    Args:
        config: Configuration served to ``get_config``.
        credentials: Credential loader spy with a configurable universe domain.
        environment: Dict-backed environment lookup.
        resolved_spy: Captures resolved configurations instead of printing.
    """
    from ..adapters.memory import (
        CredentialSpy,
        FakeEnvironment,
        InMemoryConfig,
        ResolvedSpy,
        default_endpoints_in_memory,
        display_config_in_memory,
        init_logging_in_memory,
    )

    config_store = config if config is not None else InMemoryConfig()
    credential_spy = credentials if credentials is not None else CredentialSpy()
    env = environment if environment is not None else FakeEnvironment()
    shown = resolved_spy if resolved_spy is not None else ResolvedSpy()

    return AppServices(
        get_config=config_store.get_config,
        display_config=display_config_in_memory,
        display_resolved=shown.display_resolved,
        init_logging=init_logging_in_memory,
        load_provider_settings=load_provider_settings,
        load_credentials=credential_spy.load_credentials,
        lookup_env=env.lookup_env,
        default_endpoints=default_endpoints_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "default_endpoints",
    "display_config",
    "display_resolved",
    "get_config",
    "init_logging",
    "load_credentials",
    "load_provider_settings",
    "lookup_env",
]
