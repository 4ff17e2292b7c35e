"""Load credential material and report the universe domain it implies.

Credential JSON (service account keys, authorized-user files, workload
identity configurations) is parsed with orjson and validated with the
ServiceAccountKeyModel Pydantic model. No network calls are made; the
transport performs token exchange later.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

import orjson
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from gcpconf.domain.credentials import (
    AccessTokenAuth,
    AuthMaterial,
    CredentialBlobAuth,
    ExternalCredentialAuth,
    LoadedCredentials,
)
from gcpconf.domain.errors import ConfigurationCancelledError, CredentialLoadError
from gcpconf.domain.universe import DEFAULT_UNIVERSE_DOMAIN

logger = logging.getLogger(__name__)

APPLICATION_CREDENTIALS_ENV_VAR: Final[str] = "GOOGLE_APPLICATION_CREDENTIALS"
KNOWN_CREDENTIAL_TYPES: Final[frozenset[str]] = frozenset(
    {
        "service_account",
        "authorized_user",
        "external_account",
        "external_account_authorized_user",
        "impersonated_service_account",
    }
)


class ServiceAccountKeyModel(BaseModel):
    """Credential JSON as downloaded from the console or written by gcloud.

    Example:
        >>> key = ServiceAccountKeyModel.model_validate(
        ...     {"type": "service_account", "client_email": "sa@p.iam.gserviceaccount.com", "private_key": "k"}
        ... )
        >>> key.universe_domain
        ''
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    project_id: str | None = None
    client_email: str | None = None
    private_key: str | None = None
    universe_domain: str = ""

    @field_validator("type")
    @classmethod
    def _known_type(cls, v: str) -> str:
        if v not in KNOWN_CREDENTIAL_TYPES:
            raise ValueError(f"unsupported credential type {v!r}")
        return v

    @model_validator(mode="after")
    def _service_account_fields(self) -> ServiceAccountKeyModel:
        if self.type == "service_account" and not (self.client_email and self.private_key):
            raise ValueError("service_account credentials require client_email and private_key")
        return self

    def __repr__(self) -> str:
        return f"ServiceAccountKeyModel(type={self.type!r}, client_email={self.client_email!r}, private_key='[REDACTED]')"


def _check_cancel(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise ConfigurationCancelledError("configuration cancelled while loading credentials")


def is_credential_file(value: str) -> bool:
    """Tell whether a credential value names an existing file rather than inline JSON.

    Lookup errors such as ENAMETOOLONG count as "not a file".

    Example:
        >>> is_credential_file('{"type": "service_account", "id": "' + "a" * 400 + '"}')
        False
    """
    try:
        return Path(value).expanduser().is_file()
    except OSError:
        return False


def _read_source(value: str) -> bytes:
    """Return the JSON bytes for a credential value that is a path or inline JSON."""
    if not is_credential_file(value):
        return value.encode("utf-8")
    candidate = Path(value).expanduser()
    try:
        return candidate.read_bytes()
    except OSError as exc:
        raise CredentialLoadError(f"cannot read credentials file {candidate}: {exc}") from exc


def parse_credential_json(raw: bytes) -> ServiceAccountKeyModel:
    """Parse and validate credential JSON.

    Raises:
        CredentialLoadError: When the text is not JSON or not a known credential shape.

    Example:
        >>> parse_credential_json(b'{"type": "authorized_user"}').type
        'authorized_user'
        >>> parse_credential_json(b"not json")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        CredentialLoadError: credentials are not valid JSON
    """
    try:
        data: Any = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise CredentialLoadError("credentials are not valid JSON") from exc
    try:
        return ServiceAccountKeyModel.model_validate(data)
    except ValidationError as exc:
        raise CredentialLoadError(f"credentials are not valid: {exc.errors()[0]['msg']}") from exc


def _implied_domain(key: ServiceAccountKeyModel) -> str:
    return "" if key.universe_domain == DEFAULT_UNIVERSE_DOMAIN else key.universe_domain


def well_known_adc_path() -> Path:
    """Return where ``gcloud auth application-default login`` writes credentials."""
    config_dir = os.environ.get("CLOUDSDK_CONFIG")
    if config_dir:
        return Path(config_dir) / "application_default_credentials.json"
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", "")) / "gcloud" / "application_default_credentials.json"
    return Path.home() / ".config" / "gcloud" / "application_default_credentials.json"


def _load_key(value: str, kind: str) -> LoadedCredentials:
    key = parse_credential_json(_read_source(value))
    return LoadedCredentials(
        kind=kind,
        universe_domain=_implied_domain(key),
        service_account_email=key.client_email or "",
        project_id=key.project_id or "",
    )


def _load_ambient() -> LoadedCredentials:
    explicit = os.environ.get(APPLICATION_CREDENTIALS_ENV_VAR, "")
    if explicit:
        if not Path(explicit).expanduser().is_file():
            raise CredentialLoadError(f"{APPLICATION_CREDENTIALS_ENV_VAR} points to a missing file: {explicit}")
        return _load_key(explicit, "ambient")
    adc = well_known_adc_path()
    if adc.is_file():
        return _load_key(str(adc), "ambient")
    raise CredentialLoadError(
        "no credentials configured and no application default credentials found; "
        f"set credentials, access_token or {APPLICATION_CREDENTIALS_ENV_VAR}"
    )


def _load(auth: AuthMaterial) -> LoadedCredentials:
    if isinstance(auth, AccessTokenAuth):
        # The token wins over a credential blob supplied next to it.
        if not auth.access_token.strip():
            raise CredentialLoadError("access token is empty")
        return LoadedCredentials(kind=auth.kind)
    if isinstance(auth, ExternalCredentialAuth):
        if "@" not in auth.credential.service_account_email:
            raise CredentialLoadError(
                f"external_credentials.service_account_email {auth.credential.service_account_email!r} is not an email"
            )
        return LoadedCredentials(kind=auth.kind, service_account_email=auth.credential.service_account_email)
    if isinstance(auth, CredentialBlobAuth):
        return _load_key(auth.credentials, auth.kind)
    return _load_ambient()


def load_credentials(
    auth: AuthMaterial,
    *,
    scopes: Sequence[str] = (),
    impersonate_service_account: str = "",
    delegates: Sequence[str] = (),
    cancel: threading.Event | None = None,
) -> LoadedCredentials:
    """Load ``auth`` and return the credential facts the assembler needs.

    Args:
        auth: Auth material chosen by the credential resolver.
        scopes: OAuth scopes requested for the credentials.
        impersonate_service_account: Target service account, if impersonating.
        delegates: Delegation chain for impersonation.
        cancel: Cancellation signal checked before and after loading.

    Raises:
        CredentialLoadError: When the material is rejected.
        ConfigurationCancelledError: When ``cancel`` is set.
    """
    _check_cancel(cancel)
    loaded = _load(auth)
    _check_cancel(cancel)

    logger.debug(
        "Credentials loaded",
        extra={"auth_source": loaded.kind, "scopes": list(scopes), "universe_domain": loaded.universe_domain},
    )
    if impersonate_service_account:
        logger.debug(
            "Impersonating service account",
            extra={"target": impersonate_service_account, "delegates": list(delegates)},
        )
        return LoadedCredentials(
            kind=loaded.kind,
            universe_domain=loaded.universe_domain,
            service_account_email=impersonate_service_account,
            project_id=loaded.project_id,
        )
    return loaded


__all__ = [
    "APPLICATION_CREDENTIALS_ENV_VAR",
    "ServiceAccountKeyModel",
    "is_credential_file",
    "load_credentials",
    "parse_credential_json",
    "well_known_adc_path",
]
