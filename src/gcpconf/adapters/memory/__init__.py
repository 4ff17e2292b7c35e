"""In-memory adapter implementations for testing.

Lightweight implementations of every application port: no filesystem, no
process environment, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.credentials` - Credential loading spy
    * :mod:`.environment` - Dict-backed environment and static endpoints
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import InMemoryConfig, ResolvedSpy, display_config_in_memory, get_config_in_memory
from .credentials import CredentialSpy
from .environment import FakeEnvironment, default_endpoints_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from ...application.ports import (
        DefaultEndpoints,
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadCredentials,
        LookupEnv,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_default_endpoints: DefaultEndpoints = default_endpoints_in_memory
    _assert_load_credentials: LoadCredentials = CredentialSpy().load_credentials
    _assert_lookup_env: LookupEnv = FakeEnvironment().lookup_env

__all__ = [
    "CredentialSpy",
    "FakeEnvironment",
    "InMemoryConfig",
    "ResolvedSpy",
    "default_endpoints_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
