"""Domain layer - pure configuration logic with no I/O or framework dependencies.

Contents:
    * :mod:`.settings` - Typed provider settings (RawSettings, ExternalCredential)
    * :mod:`.credentials` - Credential source precedence and the AuthMaterial union
    * :mod:`.universe` - Universe domain cross-check
    * :mod:`.labels` - Default labels and attribution policy
    * :mod:`.batching` - Batching policy expansion
    * :mod:`.durations` - Duration string parsing
    * :mod:`.endpoints` - Service base-path table and rewrites
    * :mod:`.operations` - Operation registry merging
    * :mod:`.resolved` - The resolved runtime configuration
    * :mod:`.enums` - Domain enumerations (AttributionStrategy, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .batching import BatchingPolicy, expand_batching
from .credentials import (
    AccessTokenAuth,
    AmbientAuth,
    AuthMaterial,
    CredentialBlobAuth,
    EnvLookup,
    ExternalCredentialAuth,
    LoadedCredentials,
    env_lookup_from_mapping,
    resolve_auth,
)
from .durations import parse_duration
from .endpoints import DEFAULT_BASE_PATHS, EndpointTable, mtls_endpoint
from .enums import AttributionStrategy, OutputFormat
from .errors import (
    ConfigurationCancelledError,
    ConfigurationError,
    CredentialLoadError,
    DuplicateOperationError,
    MalformedSettingError,
    UniverseDomainMismatchError,
)
from .labels import LabelPolicy, attribution_labels, resolve_label_policy
from .operations import merge_registries, merge_registries_strict
from .resolved import DEFAULT_SCOPES, ResolvedConfiguration
from .settings import BatchingSettings, ExternalCredential, RawSettings
from .universe import DEFAULT_UNIVERSE_DOMAIN, validate_universe_domain

__all__ = [
    # Settings
    "BatchingSettings",
    "ExternalCredential",
    "RawSettings",
    # Credentials
    "AccessTokenAuth",
    "AmbientAuth",
    "AuthMaterial",
    "CredentialBlobAuth",
    "EnvLookup",
    "ExternalCredentialAuth",
    "LoadedCredentials",
    "env_lookup_from_mapping",
    "resolve_auth",
    # Policies
    "BatchingPolicy",
    "LabelPolicy",
    "attribution_labels",
    "expand_batching",
    "parse_duration",
    "resolve_label_policy",
    # Endpoints and universe
    "DEFAULT_BASE_PATHS",
    "DEFAULT_UNIVERSE_DOMAIN",
    "EndpointTable",
    "mtls_endpoint",
    "validate_universe_domain",
    # Operations
    "merge_registries",
    "merge_registries_strict",
    # Result
    "DEFAULT_SCOPES",
    "ResolvedConfiguration",
    # Enums
    "AttributionStrategy",
    "OutputFormat",
    # Errors
    "ConfigurationCancelledError",
    "ConfigurationError",
    "CredentialLoadError",
    "DuplicateOperationError",
    "MalformedSettingError",
    "UniverseDomainMismatchError",
]
