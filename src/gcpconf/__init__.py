"""Public package surface for GCP provider configuration resolution.

Routes imports through the architectural layers:
- Domain exports: resolved configuration value, errors, pure policies
- Application exports: configuration and catalog assembly
- Composition exports: wired production adapters
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import assemble_catalog, assemble_configuration

# Composition exports (wired adapters)
from .composition import build_production, get_config, load_credentials, load_provider_settings

# Domain exports
from .domain import (
    AttributionStrategy,
    BatchingPolicy,
    ConfigurationCancelledError,
    ConfigurationError,
    CredentialLoadError,
    DuplicateOperationError,
    MalformedSettingError,
    RawSettings,
    ResolvedConfiguration,
    UniverseDomainMismatchError,
    attribution_labels,
    merge_registries,
)

__all__ = [
    "AttributionStrategy",
    "BatchingPolicy",
    "ConfigurationCancelledError",
    "ConfigurationError",
    "CredentialLoadError",
    "DuplicateOperationError",
    "MalformedSettingError",
    "RawSettings",
    "ResolvedConfiguration",
    "UniverseDomainMismatchError",
    "assemble_catalog",
    "assemble_configuration",
    "attribution_labels",
    "build_production",
    "get_config",
    "load_credentials",
    "load_provider_settings",
    "merge_registries",
    "print_info",
]
