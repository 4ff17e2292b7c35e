"""Select the single active credential source under a fixed precedence.

Precedence:
    1. a complete external credential record;
    2. an access token (a credential blob set next to it is kept as well);
    3. a credential blob;
    4. environment variables, consulted only when none of the three
       config-level auth fields is set;
    5. ambient default credentials.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Final

from .settings import ExternalCredential, RawSettings

CREDENTIALS_ENV_VARS: Final[tuple[str, ...]] = (
    "GOOGLE_CREDENTIALS",
    "GOOGLE_CLOUD_KEYFILE_JSON",
    "GCLOUD_KEYFILE_JSON",
)
ACCESS_TOKEN_ENV_VARS: Final[tuple[str, ...]] = ("GOOGLE_OAUTH_ACCESS_TOKEN",)

EnvLookup = Callable[[Sequence[str]], str]
"""Return the first non-empty value among the named variables, or ``""``."""


def env_lookup_from_mapping(environ: Mapping[str, str]) -> EnvLookup:
    """Build an :data:`EnvLookup` over a mapping such as ``os.environ``.

    Example:
        >>> lookup = env_lookup_from_mapping({"B": "2", "C": "3"})
        >>> lookup(["A", "B", "C"])
        '2'
        >>> lookup(["A"])
        ''
    """

    def _lookup(names: Sequence[str]) -> str:
        for name in names:
            value = environ.get(name, "")
            if value:
                return value
        return ""

    return _lookup


@dataclass(frozen=True, slots=True)
class AmbientAuth:
    """No explicit material; the loader falls back to default credentials."""

    kind: str = field(default="ambient", init=False)


@dataclass(frozen=True, slots=True)
class ExternalCredentialAuth:
    credential: ExternalCredential
    kind: str = field(default="external_credentials", init=False)


@dataclass(frozen=True, slots=True)
class AccessTokenAuth:
    """An OAuth2 access token.

    ``credentials`` holds a blob that was supplied next to the token; which
    of the two is used is decided by the credential loader.
    """

    access_token: str = field(repr=False)
    credentials: str = field(default="", repr=False)
    kind: str = field(default="access_token", init=False)


@dataclass(frozen=True, slots=True)
class CredentialBlobAuth:
    """A service-account key or other credential JSON, inline or as a path."""

    credentials: str = field(repr=False)
    kind: str = field(default="credentials", init=False)


AuthMaterial = AmbientAuth | ExternalCredentialAuth | AccessTokenAuth | CredentialBlobAuth


@dataclass(frozen=True, slots=True)
class LoadedCredentials:
    """Outcome of credential loading.

    ``universe_domain`` is the domain implied by the credentials; ``""``
    means the default domain.
    """

    kind: str
    universe_domain: str = ""
    service_account_email: str = ""
    project_id: str = ""


def _from_token_and_blob(access_token: str, credentials: str) -> AuthMaterial:
    if access_token:
        return AccessTokenAuth(access_token=access_token, credentials=credentials)
    if credentials:
        return CredentialBlobAuth(credentials=credentials)
    return AmbientAuth()


def resolve_auth(settings: RawSettings, env: EnvLookup) -> AuthMaterial:
    """Pick the active auth material for ``settings``.

    Args:
        settings: Typed provider settings.
        env: Environment lookup used only when no auth field is configured.

    Returns:
        Exactly one auth variant.

    Examples:
        >>> env = env_lookup_from_mapping({"GOOGLE_CREDENTIALS": "A", "GOOGLE_CLOUD_KEYFILE_JSON": "B"})
        >>> resolve_auth(RawSettings(), env).kind
        'credentials'
        >>> resolve_auth(RawSettings(), env).credentials
        'A'
        >>> resolve_auth(RawSettings(access_token="tok"), env).kind
        'access_token'
        >>> resolve_auth(RawSettings(), env_lookup_from_mapping({})).kind
        'ambient'
    """
    if settings.external_credentials is not None:
        return ExternalCredentialAuth(credential=settings.external_credentials)

    if settings.access_token or settings.credentials:
        return _from_token_and_blob(settings.access_token, settings.credentials)

    return _from_token_and_blob(env(ACCESS_TOKEN_ENV_VARS), env(CREDENTIALS_ENV_VARS))


__all__ = [
    "ACCESS_TOKEN_ENV_VARS",
    "CREDENTIALS_ENV_VARS",
    "AccessTokenAuth",
    "AmbientAuth",
    "AuthMaterial",
    "CredentialBlobAuth",
    "EnvLookup",
    "ExternalCredentialAuth",
    "LoadedCredentials",
    "env_lookup_from_mapping",
    "resolve_auth",
]
