"""Service base-path table and its rewrites.

The process-wide defaults are a read-only snapshot (see
``application.endpoints``). Each configure call copies that snapshot into an
:class:`EndpointTable` it owns, so rewrites never touch shared state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Final
from urllib.parse import urlsplit, urlunsplit

from .universe import DEFAULT_UNIVERSE_DOMAIN

DEFAULT_BASE_PATHS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "artifact_registry": "https://artifactregistry.googleapis.com/v1/",
        "bigquery": "https://bigquery.googleapis.com/bigquery/v2/",
        "bigtable": "https://bigtableadmin.googleapis.com/v2/",
        "cloud_functions": "https://cloudfunctions.googleapis.com/v1/",
        "cloud_run_v2": "https://run.googleapis.com/v2/",
        "compute": "https://compute.googleapis.com/compute/v1/",
        "container": "https://container.googleapis.com/v1/",
        "dns": "https://dns.googleapis.com/dns/v1/",
        "iam": "https://iam.googleapis.com/v1/",
        "iam_credentials": "https://iamcredentials.googleapis.com/v1/",
        "kms": "https://cloudkms.googleapis.com/v1/",
        "logging": "https://logging.googleapis.com/v2/",
        "monitoring": "https://monitoring.googleapis.com/",
        "pubsub": "https://pubsub.googleapis.com/v1/",
        "resource_manager": "https://cloudresourcemanager.googleapis.com/v1/",
        "resource_manager_v3": "https://cloudresourcemanager.googleapis.com/v3/",
        "secret_manager": "https://secretmanager.googleapis.com/v1/",
        "service_usage": "https://serviceusage.googleapis.com/v1/",
        "sql": "https://sqladmin.googleapis.com/sql/v1beta4/",
        "storage": "https://storage.googleapis.com/storage/v1/",
    }
)

_MTLS_SUFFIX = ".mtls." + DEFAULT_UNIVERSE_DOMAIN
_SANDBOX_SUFFIX = ".sandbox." + DEFAULT_UNIVERSE_DOMAIN
_MTLS_SANDBOX_SUFFIX = ".mtls.sandbox." + DEFAULT_UNIVERSE_DOMAIN


def mtls_endpoint(url: str) -> str:
    """Return the mutual-TLS variant of a Google API base URL.

    Non-Google hosts and hosts already on mTLS are returned unchanged.

    Examples:
        >>> mtls_endpoint("https://compute.googleapis.com/compute/v1/")
        'https://compute.mtls.googleapis.com/compute/v1/'
        >>> mtls_endpoint("https://foo.sandbox.googleapis.com/v1/")
        'https://foo.mtls.sandbox.googleapis.com/v1/'
        >>> mtls_endpoint("https://compute.mtls.googleapis.com/compute/v1/")
        'https://compute.mtls.googleapis.com/compute/v1/'
        >>> mtls_endpoint("https://example.com/v1/")
        'https://example.com/v1/'
    """
    parts = urlsplit(url)
    host = parts.hostname or ""
    if host.endswith((_MTLS_SUFFIX, _MTLS_SANDBOX_SUFFIX)):
        return url
    if host.endswith(_SANDBOX_SUFFIX):
        new_host = host[: -len(_SANDBOX_SUFFIX)] + _MTLS_SANDBOX_SUFFIX
    elif host.endswith("." + DEFAULT_UNIVERSE_DOMAIN):
        new_host = host[: -len(DEFAULT_UNIVERSE_DOMAIN) - 1] + _MTLS_SUFFIX
    else:
        return url
    netloc = new_host if parts.port is None else f"{new_host}:{parts.port}"
    return urlunsplit(parts._replace(netloc=netloc))


class EndpointTable:
    """Mutable mapping from service name to base-URL template.

    Example:
        >>> table = EndpointTable({"svc": "https://svc.googleapis.com/"})
        >>> table.replace_domain("example.com")
        >>> table["svc"]
        'https://svc.example.com/'
    """

    __slots__ = ("_paths",)

    def __init__(self, base_paths: Mapping[str, str]) -> None:
        self._paths: dict[str, str] = dict(base_paths)

    def __getitem__(self, service: str) -> str:
        return self._paths[service]

    def __contains__(self, service: object) -> bool:
        return service in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"EndpointTable({self._paths!r})"

    def rewrite(self, transform: Callable[[str], str]) -> None:
        """Apply ``transform`` to every base path in place."""
        for service, base_path in self._paths.items():
            self._paths[service] = transform(base_path)

    def replace_domain(self, domain: str) -> None:
        """Substitute ``domain`` for the default universe domain in every entry.

        Empty and default domains leave the table untouched. Repeating the
        call with the same domain is a no-op.
        """
        if not domain or domain == DEFAULT_UNIVERSE_DOMAIN:
            return
        self.rewrite(lambda base_path: base_path.replace(DEFAULT_UNIVERSE_DOMAIN, domain))

    def override(self, custom_endpoints: Mapping[str, str]) -> None:
        """Replace entries with user-supplied custom endpoints.

        Services unknown to the table are added.
        """
        self._paths.update(custom_endpoints)

    def snapshot(self) -> Mapping[str, str]:
        """Return a read-only copy detached from this table."""
        return MappingProxyType(dict(self._paths))


__all__ = [
    "DEFAULT_BASE_PATHS",
    "EndpointTable",
    "mtls_endpoint",
]
