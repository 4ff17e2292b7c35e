"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config.

Typical use is tweaking a single provider field for one invocation::

    gcpconf resolve --set provider.region=europe-west1 --set provider.scopes='["a","b"]'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values an override may carry after JSON coercion."""

OverrideTree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed override: top-level section, nested key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when possible, otherwise keep the text.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("30")
        30
        >>> coerce_value('{"env": "prod"}')
        {'env': 'prod'}
        >>> coerce_value("us-central1")
        'us-central1'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Raises:
        ValueError: When ``=`` is missing, the path has no dot, or a path
            component is empty.

    Examples:
        >>> parse_override("provider.region=us-east1")
        ConfigOverride(section='provider', key_path=('region',), value='us-east1')
        >>> parse_override("provider.default_labels.team=infra").key_path
        ('default_labels', 'team')
        >>> parse_override("provider=x")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'provider=x': key must contain at least one dot (SECTION.KEY)
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def build_override_tree(overrides: Iterable[ConfigOverride]) -> OverrideTree:
    """Nest parsed overrides into the dict shape ``Config.with_overrides`` expects.

    Later overrides for the same key win.

    Raises:
        TypeError: When an override descends into a key already set to a scalar.

    Example:
        >>> build_override_tree([parse_override("provider.batching.send_after=5s")])
        {'provider': {'batching': {'send_after': '5s'}}}
    """
    tree: OverrideTree = {}
    for override in overrides:
        node: dict[str, object] = tree.setdefault(override.section, {})
        *parents, leaf = override.key_path
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
            node = cast("dict[str, object]", child)
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override merged in.

    Example:
        >>> cfg = Config({"provider": {"zone": "a"}}, {})
        >>> apply_overrides(cfg, ("provider.zone=b",))["provider"]["zone"]
        'b'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(build_override_tree(parse_override(raw) for raw in raw_overrides))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "build_override_tree",
    "coerce_value",
    "parse_override",
]
