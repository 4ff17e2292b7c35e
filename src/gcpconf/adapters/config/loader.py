"""Layered configuration loading.

The bundled ``defaultconfig.toml`` is the lowest layer; app, host, user,
dotenv and environment layers are stacked on top by lib_layered_config.
Environment variables use the ``GCPCONF___PROVIDER__PROJECT=demo`` form.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from gcpconf import __init__conf__


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` path.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


class LayeredConfigLoader:
    """Read the layered configuration once per ``(profile, start_dir)``.

    Instances satisfy the GetConfig port. ``cache_clear`` drops every cached
    Config so tests can change configuration files between runs.

    Example:
        >>> loader = LayeredConfigLoader(vendor="gcpconf", app="gcpconf", slug="gcpconf",
        ...                              default_file=get_default_config_path())
        >>> loader(profile="../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile name
    """

    def __init__(self, *, vendor: str, app: str, slug: str, default_file: Path, cache_size: int = 4) -> None:
        self._vendor = vendor
        self._app = app
        self._slug = slug
        self._default_file = default_file
        self._read = lru_cache(maxsize=cache_size)(self._read_uncached)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration.

        Raises:
            ValueError: When ``profile`` is empty, too long or contains path characters.
        """
        if profile is not None:
            validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        self._read.cache_clear()

    def _read_uncached(self, profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=self._vendor,
            app=self._app,
            slug=self._slug,
            profile=profile,
            default_file=self._default_file,
            start_dir=start_dir,
        )


get_config = LayeredConfigLoader(
    vendor=__init__conf__.LAYEREDCONF_VENDOR,
    app=__init__conf__.LAYEREDCONF_APP,
    slug=__init__conf__.LAYEREDCONF_SLUG,
    default_file=get_default_config_path(),
)


__all__ = [
    "LayeredConfigLoader",
    "get_config",
    "get_default_config_path",
]
