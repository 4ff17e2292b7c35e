"""Default labels and the provider attribution label policy."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import AttributionStrategy

ATTRIBUTION_LABEL_KEY = "goog-terraform-provisioned"
ATTRIBUTION_LABEL_VALUE = "true"


@dataclass(frozen=True, slots=True)
class LabelPolicy:
    """Resolved label settings.

    ``strategy`` is None exactly when attribution labeling is disabled.
    """

    default_labels: Mapping[str, str]
    add_attribution_label: bool
    strategy: AttributionStrategy | None


def resolve_label_policy(
    default_labels: Mapping[str, str],
    *,
    add_attribution_label: bool = True,
    strategy: str = "",
) -> LabelPolicy:
    """Copy the default labels and select the attribution strategy.

    Args:
        default_labels: User default labels, copied verbatim.
        add_attribution_label: Whether the attribution label is enabled.
        strategy: Raw strategy value; empty selects CREATE_ONLY.

    Raises:
        MalformedSettingError: When attribution is enabled and ``strategy``
            names no known strategy.

    Examples:
        >>> resolve_label_policy({"team": "infra"}).strategy
        <AttributionStrategy.CREATE_ONLY: 'CREATION_ONLY'>
        >>> resolve_label_policy({}, add_attribution_label=False, strategy="bogus").strategy is None
        True
    """
    labels = MappingProxyType(dict(default_labels))
    if not add_attribution_label:
        return LabelPolicy(default_labels=labels, add_attribution_label=False, strategy=None)

    selected = AttributionStrategy.parse(strategy) if strategy else AttributionStrategy.CREATE_ONLY
    return LabelPolicy(default_labels=labels, add_attribution_label=True, strategy=selected)


def attribution_labels(labels: Mapping[str, str], policy: LabelPolicy, *, creating: bool) -> dict[str, str]:
    """Return ``labels`` merged over the defaults, plus attribution where due.

    Resource labels win over default labels. The attribution label is added
    on create for either strategy, and on update only for PROACTIVE.

    Example:
        >>> policy = resolve_label_policy({"env": "dev"})
        >>> attribution_labels({"app": "web"}, policy, creating=True)
        {'env': 'dev', 'app': 'web', 'goog-terraform-provisioned': 'true'}
        >>> attribution_labels({"app": "web"}, policy, creating=False)
        {'env': 'dev', 'app': 'web'}
    """
    merged = {**policy.default_labels, **labels}
    if policy.strategy is None:
        return merged
    if creating or policy.strategy is AttributionStrategy.PROACTIVE:
        merged.setdefault(ATTRIBUTION_LABEL_KEY, ATTRIBUTION_LABEL_VALUE)
    return merged


__all__ = [
    "ATTRIBUTION_LABEL_KEY",
    "ATTRIBUTION_LABEL_VALUE",
    "LabelPolicy",
    "attribution_labels",
    "resolve_label_policy",
]
