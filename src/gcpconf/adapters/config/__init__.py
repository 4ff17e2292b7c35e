"""Configuration adapter - loading, provider settings, display, and overrides.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.settings` - ``[provider]`` schema validation into RawSettings
    * :mod:`.display` - Configuration and resolved-configuration display
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config, display_resolved
from .loader import LayeredConfigLoader, get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import ProviderSettingsModel, load_provider_settings

__all__ = [
    "LayeredConfigLoader",
    "ProviderSettingsModel",
    "apply_overrides",
    "display_config",
    "display_resolved",
    "get_config",
    "get_default_config_path",
    "load_provider_settings",
]
