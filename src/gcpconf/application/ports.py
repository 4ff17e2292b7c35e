"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.credentials import AuthMaterial, LoadedCredentials
from ..domain.enums import OutputFormat
from ..domain.resolved import ResolvedConfiguration
from ..domain.settings import RawSettings

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class DisplayResolved(Protocol):
    """Display a resolved provider configuration with secrets redacted."""

    def __call__(self, resolved: ResolvedConfiguration, *, output_format: OutputFormat = ...) -> None: ...


class LookupEnv(Protocol):
    """Return the first non-empty environment value among ``names``."""

    def __call__(self, names: Sequence[str]) -> str: ...


class LoadProviderSettings(Protocol):
    """Validate the ``[provider]`` section into typed settings."""

    def __call__(self, config_dict: Mapping[str, Any], *, env: LookupEnv) -> RawSettings: ...


class LoadCredentials(Protocol):
    """Load and validate auth material, reporting the implied universe domain.

    Implementations raise ``CredentialLoadError`` when the material is
    rejected and ``ConfigurationCancelledError`` when ``cancel`` is set.
    """

    def __call__(
        self,
        auth: AuthMaterial,
        *,
        scopes: Sequence[str] = ...,
        impersonate_service_account: str = ...,
        delegates: Sequence[str] = ...,
        cancel: threading.Event | None = ...,
    ) -> LoadedCredentials: ...


class DefaultEndpoints(Protocol):
    """Return the process-wide read-only default endpoint snapshot."""

    def __call__(self) -> Mapping[str, str]: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DefaultEndpoints",
    "DisplayConfig",
    "DisplayResolved",
    "GetConfig",
    "InitLogging",
    "LoadCredentials",
    "LoadProviderSettings",
    "LookupEnv",
]
