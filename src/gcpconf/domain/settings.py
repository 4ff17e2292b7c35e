"""Typed provider settings as handed over by the schema layer.

The schema layer (``adapters.config.settings``) performs type coercion and
field-level validation; everything here is already typed and immutable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ExternalCredential:
    """Workload identity federation material; complete or absent."""

    audience: str
    service_account_email: str
    identity_token: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class BatchingSettings:
    """Nested ``batching`` record.

    ``None`` means the field was not set; the expander then falls back to the
    zero policy for that field.
    """

    send_after: str | None = None
    enable_batching: bool | None = None


@dataclass(frozen=True, slots=True)
class RawSettings:
    """User-supplied provider settings, immutable once received.

    ``universe_domain`` is ``None`` when the field is unset, which differs
    from an explicit ``"googleapis.com"`` in the domain decision table.

    Example:
        >>> settings = RawSettings(project="my-project", region="us-central1")
        >>> settings.add_terraform_attribution_label
        True
        >>> settings.external_credentials is None
        True
    """

    credentials: str = field(default="", repr=False)
    access_token: str = field(default="", repr=False)
    external_credentials: ExternalCredential | None = None
    impersonate_service_account: str = ""
    impersonate_service_account_delegates: tuple[str, ...] = ()
    project: str = ""
    billing_project: str = ""
    region: str = ""
    zone: str = ""
    scopes: tuple[str, ...] = ()
    universe_domain: str | None = None
    batching: BatchingSettings | None = None
    user_project_override: bool = False
    request_timeout: str = ""
    request_reason: str = ""
    default_labels: Mapping[str, str] = field(default_factory=_empty_mapping)
    add_terraform_attribution_label: bool = True
    terraform_attribution_label_addition_strategy: str = ""
    custom_endpoints: Mapping[str, str] = field(default_factory=_empty_mapping)


__all__ = [
    "BatchingSettings",
    "ExternalCredential",
    "RawSettings",
]
