"""In-memory credential loading for tests.

:class:`CredentialSpy` satisfies the LoadCredentials protocol without touching
the filesystem and records every call it receives.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ...domain.credentials import AuthMaterial, LoadedCredentials
from ...domain.errors import ConfigurationCancelledError


def _empty_call_list() -> list[dict[str, Any]]:
    return []


@dataclass
class CredentialSpy:
    """Records load calls and reports a configurable universe domain.

    Attributes:
        universe_domain: Domain the fake credentials claim ("" for the default).
        raise_exception: When set, ``load_credentials`` raises it.
        calls: Captured keyword arguments of every call.

    Example:
        >>> from gcpconf.domain.credentials import AmbientAuth
        >>> spy = CredentialSpy(universe_domain="example.test")
        >>> spy.load_credentials(AmbientAuth()).universe_domain
        'example.test'
        >>> spy.calls[0]["auth"].kind
        'ambient'
    """

    universe_domain: str = ""
    raise_exception: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=_empty_call_list)

    def load_credentials(
        self,
        auth: AuthMaterial,
        *,
        scopes: Sequence[str] = (),
        impersonate_service_account: str = "",
        delegates: Sequence[str] = (),
        cancel: threading.Event | None = None,
    ) -> LoadedCredentials:
        self.calls.append(
            {
                "auth": auth,
                "scopes": tuple(scopes),
                "impersonate_service_account": impersonate_service_account,
                "delegates": tuple(delegates),
            }
        )
        if cancel is not None and cancel.is_set():
            raise ConfigurationCancelledError("configuration cancelled while loading credentials")
        if self.raise_exception is not None:
            raise self.raise_exception
        return LoadedCredentials(
            kind=auth.kind,
            universe_domain=self.universe_domain,
            service_account_email=impersonate_service_account,
        )


__all__ = ["CredentialSpy"]
