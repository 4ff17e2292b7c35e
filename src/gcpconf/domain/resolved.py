"""The resolved runtime configuration shared by every provider operation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Final

from .batching import BatchingPolicy
from .credentials import AccessTokenAuth, AuthMaterial, CredentialBlobAuth, ExternalCredentialAuth
from .enums import AttributionStrategy
from .settings import ExternalCredential

DEFAULT_SCOPES: Final[tuple[str, ...]] = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/userinfo.email",
)

_REDACTED = "[REDACTED]"


@dataclass(frozen=True, slots=True)
class ResolvedConfiguration:
    """Fully validated provider configuration, never mutated after assembly.

    Secret auth values are excluded from ``repr`` and redacted by
    :meth:`to_display_dict`.
    """

    auth: AuthMaterial
    project: str
    billing_project: str
    region: str
    zone: str
    scopes: tuple[str, ...]
    impersonate_service_account: str
    impersonate_service_account_delegates: tuple[str, ...]
    base_paths: Mapping[str, str]
    universe_domain: str
    batching: BatchingPolicy
    default_labels: Mapping[str, str]
    add_terraform_attribution_label: bool
    attribution_strategy: AttributionStrategy | None
    request_timeout: timedelta
    request_reason: str
    user_project_override: bool
    user_agent: str

    @property
    def access_token(self) -> str:
        return self.auth.access_token if isinstance(self.auth, AccessTokenAuth) else ""

    @property
    def credentials(self) -> str:
        if isinstance(self.auth, AccessTokenAuth | CredentialBlobAuth):
            return self.auth.credentials
        return ""

    @property
    def external_credential(self) -> ExternalCredential | None:
        return self.auth.credential if isinstance(self.auth, ExternalCredentialAuth) else None

    def to_display_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view with secrets redacted.

        Durations are rendered in seconds; the auth section names the active
        source and shows only non-secret fields.
        """
        auth: dict[str, Any] = {"source": self.auth.kind}
        if isinstance(self.auth, ExternalCredentialAuth):
            auth["audience"] = self.auth.credential.audience
            auth["service_account_email"] = self.auth.credential.service_account_email
            auth["identity_token"] = _REDACTED
        if self.access_token:
            auth["access_token"] = _REDACTED
        if self.credentials:
            auth["credentials"] = _REDACTED

        return {
            "auth": auth,
            "project": self.project,
            "billing_project": self.billing_project,
            "region": self.region,
            "zone": self.zone,
            "scopes": list(self.scopes),
            "impersonate_service_account": self.impersonate_service_account,
            "impersonate_service_account_delegates": list(self.impersonate_service_account_delegates),
            "universe_domain": self.universe_domain,
            "batching": {
                "enabled": self.batching.enabled,
                "send_after_seconds": self.batching.send_after.total_seconds(),
            },
            "default_labels": dict(self.default_labels),
            "add_terraform_attribution_label": self.add_terraform_attribution_label,
            "attribution_strategy": self.attribution_strategy.value if self.attribution_strategy else None,
            "request_timeout_seconds": self.request_timeout.total_seconds(),
            "request_reason": self.request_reason,
            "user_project_override": self.user_project_override,
            "user_agent": self.user_agent,
            "base_paths": dict(sorted(self.base_paths.items())),
        }


__all__ = [
    "DEFAULT_SCOPES",
    "ResolvedConfiguration",
]
