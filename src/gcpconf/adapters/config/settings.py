"""Provider settings model and loader.

Provides the ProviderSettingsModel Pydantic model, the schema layer that turns
the ``[provider]`` configuration section into typed, field-validated
:class:`~gcpconf.domain.settings.RawSettings`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gcpconf.adapters.credentials.loader import is_credential_file
from gcpconf.domain.endpoints import DEFAULT_BASE_PATHS
from gcpconf.domain.settings import BatchingSettings, ExternalCredential, RawSettings

if TYPE_CHECKING:
    from gcpconf.application.ports import LookupEnv

CUSTOM_ENDPOINT_SUFFIX: Final[str] = "_custom_endpoint"

#: Environment fallbacks for unset fields, first non-empty variable wins.
ENV_DEFAULTS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "project": ("GOOGLE_PROJECT", "GOOGLE_CLOUD_PROJECT", "GCLOUD_PROJECT", "CLOUDSDK_CORE_PROJECT"),
        "billing_project": ("GOOGLE_BILLING_PROJECT",),
        "region": ("GOOGLE_REGION", "GCLOUD_REGION", "CLOUDSDK_COMPUTE_REGION"),
        "zone": ("GOOGLE_ZONE", "GCLOUD_ZONE", "CLOUDSDK_COMPUTE_ZONE"),
        "impersonate_service_account": ("GOOGLE_IMPERSONATE_SERVICE_ACCOUNT",),
        "request_reason": ("CLOUDSDK_CORE_REQUEST_REASON",),
        "user_project_override": ("USER_PROJECT_OVERRIDE",),
    }
)

_CUSTOM_ENDPOINT_PATTERN = re.compile(r".*/[^/]+/$")
_EXCLUSIVE_AUTH_FIELDS: Final[tuple[str, ...]] = ("credentials", "access_token", "external_credentials")


def _at_most_one(v: Any, name: str) -> Any:
    """Unwrap single-element lists used for nested blocks."""
    if isinstance(v, list):
        items = cast(list[Any], v)
        if len(items) > 1:
            raise ValueError(f"{name} accepts at most one block, got {len(items)}")
        return items[0] if items else None
    return v


class ExternalCredentialModel(BaseModel):
    """``external_credentials`` block; all three fields are required."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    audience: str
    service_account_email: str
    identity_token: str

    @field_validator("audience", "service_account_email", "identity_token")
    @classmethod
    def _require_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class BatchingModel(BaseModel):
    """``batching`` block with the schema defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    send_after: str = "10s"
    enable_batching: bool = True


class ProviderSettingsModel(BaseModel):
    """Validated, immutable ``[provider]`` settings.

    Example:
        >>> model = ProviderSettingsModel(project="my-project", compute_custom_endpoint="https://c.example.com/v1/")
        >>> model.custom_endpoints
        {'compute': 'https://c.example.com/v1/'}
        >>> model.add_terraform_attribution_label
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    credentials: str | None = None
    access_token: str | None = None
    external_credentials: ExternalCredentialModel | None = None
    impersonate_service_account: str | None = None
    impersonate_service_account_delegates: list[str] = Field(default_factory=list)
    project: str | None = None
    billing_project: str | None = None
    region: str | None = None
    zone: str | None = None
    scopes: list[str] = Field(default_factory=list)
    universe_domain: str | None = None
    batching: BatchingModel | None = None
    user_project_override: bool = False
    request_timeout: str | None = None
    request_reason: str | None = None
    default_labels: dict[str, str] = Field(default_factory=dict)
    add_terraform_attribution_label: bool = True
    terraform_attribution_label_addition_strategy: str | None = None
    custom_endpoints: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_custom_endpoints(cls, data: Any) -> Any:
        """Fold ``<service>_custom_endpoint`` keys into ``custom_endpoints``.

        Example:
            >>> ProviderSettingsModel._collect_custom_endpoints({"dns_custom_endpoint": "https://d/v1/"})
            {'custom_endpoints': {'dns': 'https://d/v1/'}}
        """
        if not isinstance(data, Mapping):
            return data
        raw = dict(cast(Mapping[str, Any], data))
        endpoints: dict[str, Any] = dict(cast(Mapping[str, Any], raw.pop("custom_endpoints", None) or {}))
        for key in [k for k in raw if k.endswith(CUSTOM_ENDPOINT_SUFFIX)]:
            value = raw.pop(key)
            if value:
                endpoints[key[: -len(CUSTOM_ENDPOINT_SUFFIX)]] = value
        raw["custom_endpoints"] = endpoints
        return raw

    @field_validator("external_credentials", mode="before")
    @classmethod
    def _unwrap_external_credentials(cls, v: Any) -> Any:
        return _at_most_one(v, "external_credentials")

    @field_validator("batching", mode="before")
    @classmethod
    def _unwrap_batching(cls, v: Any) -> Any:
        return _at_most_one(v, "batching")

    @field_validator("scopes", "impersonate_service_account_delegates", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> list[str]:
        """Coerce single strings to single-element lists.

        Environment variables and .env files provide single strings instead
        of TOML arrays. Empty strings become empty lists.

        Examples:
            >>> ProviderSettingsModel._coerce_string_to_list("https://www.googleapis.com/auth/cloud-platform")
            ['https://www.googleapis.com/auth/cloud-platform']
            >>> ProviderSettingsModel._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [v] if v.strip() else []
        if isinstance(v, list):
            return cast(list[str], v)
        return []

    @field_validator(
        "credentials",
        "access_token",
        "impersonate_service_account",
        "project",
        "billing_project",
        "region",
        "zone",
        "universe_domain",
        "request_timeout",
        "request_reason",
        "terraform_attribution_label_addition_strategy",
        mode="before",
    )
    @classmethod
    def _coerce_empty_string_to_none(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("credentials")
    @classmethod
    def _validate_credentials(cls, v: str | None) -> str | None:
        """Accept a path to an existing file or JSON object text."""
        if v is None or is_credential_file(v):
            return v
        try:
            parsed = orjson.loads(v)
        except orjson.JSONDecodeError as exc:
            raise ValueError("credentials must be a path to an existing file or JSON credential text") from exc
        if not isinstance(parsed, dict):
            raise ValueError("JSON credentials must be an object")
        return v

    @field_validator("custom_endpoints")
    @classmethod
    def _validate_custom_endpoints(cls, v: dict[str, str]) -> dict[str, str]:
        for service, url in v.items():
            if service not in DEFAULT_BASE_PATHS:
                raise ValueError(f"unknown service {service!r} in custom endpoints")
            if not _CUSTOM_ENDPOINT_PATTERN.match(url):
                raise ValueError(
                    f"{service}{CUSTOM_ENDPOINT_SUFFIX} ({url!r}) must end with a trailing slash and a version path"
                )
        return v

    @model_validator(mode="after")
    def _validate_exclusive_auth(self) -> ProviderSettingsModel:
        """Reject more than one of credentials, access_token and external_credentials.

        Example:
            >>> ProviderSettingsModel(access_token="a", credentials="{}")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        configured = [name for name in _EXCLUSIVE_AUTH_FIELDS if getattr(self, name) is not None]
        if len(configured) > 1:
            raise ValueError(f"only one of {', '.join(_EXCLUSIVE_AUTH_FIELDS)} may be set, got {', '.join(configured)}")
        return self

    def __repr__(self) -> str:
        """Return string representation with secrets redacted.

        Example:
            >>> "tok123" in repr(ProviderSettingsModel(access_token="tok123"))
            False
        """
        fields: list[str] = []
        for name, value in self:
            if name in ("credentials", "access_token") and value is not None:
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"ProviderSettingsModel({', '.join(fields)})"

    def to_raw_settings(self) -> RawSettings:
        """Convert to the domain settings value.

        Example:
            >>> ProviderSettingsModel(region="us-east1").to_raw_settings().region
            'us-east1'
        """
        external = None
        if self.external_credentials is not None:
            external = ExternalCredential(
                audience=self.external_credentials.audience,
                service_account_email=self.external_credentials.service_account_email,
                identity_token=self.external_credentials.identity_token,
            )
        batching = None
        if self.batching is not None:
            batching = BatchingSettings(
                send_after=self.batching.send_after,
                enable_batching=self.batching.enable_batching,
            )
        return RawSettings(
            credentials=self.credentials or "",
            access_token=self.access_token or "",
            external_credentials=external,
            impersonate_service_account=self.impersonate_service_account or "",
            impersonate_service_account_delegates=tuple(self.impersonate_service_account_delegates),
            project=self.project or "",
            billing_project=self.billing_project or "",
            region=self.region or "",
            zone=self.zone or "",
            scopes=tuple(self.scopes),
            universe_domain=self.universe_domain,
            batching=batching,
            user_project_override=self.user_project_override,
            request_timeout=self.request_timeout or "",
            request_reason=self.request_reason or "",
            default_labels=MappingProxyType(dict(self.default_labels)),
            add_terraform_attribution_label=self.add_terraform_attribution_label,
            terraform_attribution_label_addition_strategy=self.terraform_attribution_label_addition_strategy or "",
            custom_endpoints=MappingProxyType(dict(self.custom_endpoints)),
        )


def apply_env_defaults(section: Mapping[str, Any], env: LookupEnv) -> dict[str, Any]:
    """Fill unset fields from their environment fallbacks.

    Example:
        >>> apply_env_defaults({}, lambda names: "p1" if "GOOGLE_PROJECT" in names else "")
        {'project': 'p1'}
        >>> apply_env_defaults({"project": "explicit"}, lambda names: "p1")["project"]
        'explicit'
    """
    result = dict(section)
    for name, variables in ENV_DEFAULTS.items():
        current = result.get(name)
        if current is None or current == "":
            value = env(variables)
            if value:
                result[name] = value
    return result


def load_provider_settings(config_dict: Mapping[str, Any], *, env: LookupEnv) -> RawSettings:
    """Load RawSettings from a configuration dictionary.

    Reads the ``provider`` section, applies environment fallbacks and
    validates it through :class:`ProviderSettingsModel`.

    Raises:
        pydantic.ValidationError: When a field fails schema validation.

    Example:
        >>> settings = load_provider_settings({"provider": {"project": "demo"}}, env=lambda names: "")
        >>> settings.project
        'demo'
    """
    section: Any = config_dict.get("provider", {})

    # Handle non-dict provider section (e.g. "provider": "invalid")
    if not isinstance(section, Mapping):
        return ProviderSettingsModel.model_validate(section).to_raw_settings()

    merged = apply_env_defaults(cast(Mapping[str, Any], section), env)
    return ProviderSettingsModel.model_validate(merged).to_raw_settings()


__all__ = [
    "BatchingModel",
    "ENV_DEFAULTS",
    "ExternalCredentialModel",
    "ProviderSettingsModel",
    "apply_env_defaults",
    "load_provider_settings",
]
