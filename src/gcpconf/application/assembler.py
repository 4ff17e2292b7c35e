"""Configuration assembly: turn typed settings into a ResolvedConfiguration.

Steps run in a fixed order and the first failure ends the call; no partial
configuration is ever returned:

    1. copy the default endpoint snapshot into an owned table
    2. resolve auth material
    3. resolve label / attribution policy
    4. expand batching and parse the request timeout
    5. load credentials (cancellable)
    6. validate the universe domain against the credentials
    7. rewrite endpoints for the validated domain, then apply custom endpoints
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import timedelta
from typing import TYPE_CHECKING, Final

from gcpconf import __init__conf__
from ..domain.batching import expand_batching
from ..domain.credentials import EnvLookup, resolve_auth
from ..domain.durations import parse_duration
from ..domain.endpoints import EndpointTable
from ..domain.labels import resolve_label_policy
from ..domain.resolved import DEFAULT_SCOPES, ResolvedConfiguration
from ..domain.settings import RawSettings
from ..domain.universe import validate_universe_domain

if TYPE_CHECKING:
    from .ports import LoadCredentials

logger = logging.getLogger(__name__)

USER_AGENT_EXTENSION_ENV_VAR: Final[str] = "GOOGLE_TERRAFORM_USERAGENT_EXTENSION"


def build_user_agent(env: EnvLookup) -> str:
    """Return the outgoing user agent, with the optional extension appended.

    Example:
        >>> build_user_agent(lambda names: "my-wrapper/1.0").endswith(" my-wrapper/1.0")
        True
    """
    base = f"{__init__conf__.name}/{__init__conf__.version}"
    extension = env((USER_AGENT_EXTENSION_ENV_VAR,)).strip()
    return f"{base} {extension}" if extension else base


def region_from_self_link(region: str) -> str:
    """Reduce a region self link to its name; plain names pass through.

    Example:
        >>> region_from_self_link("https://www.googleapis.com/compute/v1/projects/p/regions/us-central1")
        'us-central1'
        >>> region_from_self_link("europe-west1")
        'europe-west1'
    """
    if region.startswith(("https://", "http://")) and "/regions/" in region:
        return region.rstrip("/").rsplit("/", 1)[-1]
    return region


def assemble_configuration(
    settings: RawSettings,
    *,
    env: EnvLookup,
    load_credentials: LoadCredentials,
    default_endpoints: Mapping[str, str],
    cancel: threading.Event | None = None,
) -> ResolvedConfiguration:
    """Run the resolution pipeline for one configure call.

    Args:
        settings: Typed settings from the schema layer.
        env: Environment lookup for auth and user-agent variables.
        load_credentials: Credential loading collaborator.
        default_endpoints: Read-only default base paths for this process.
        cancel: Host cancellation signal honoured while loading credentials.

    Returns:
        The resolved configuration.

    Raises:
        MalformedSettingError: Bad duration or attribution strategy.
        UniverseDomainMismatchError: Declared and credential domains disagree.
        CredentialLoadError: Propagated unmodified from ``load_credentials``.
        ConfigurationCancelledError: ``cancel`` was set during loading.
    """
    endpoints = EndpointTable(default_endpoints)

    auth = resolve_auth(settings, env)
    logger.debug("Resolved credential source", extra={"auth_source": auth.kind})

    labels = resolve_label_policy(
        settings.default_labels,
        add_attribution_label=settings.add_terraform_attribution_label,
        strategy=settings.terraform_attribution_label_addition_strategy,
    )

    batching = expand_batching(settings.batching)
    request_timeout = timedelta(0)
    if settings.request_timeout:
        request_timeout = parse_duration(settings.request_timeout, field="request_timeout")

    scopes = settings.scopes or DEFAULT_SCOPES
    loaded = load_credentials(
        auth,
        scopes=scopes,
        impersonate_service_account=settings.impersonate_service_account,
        delegates=settings.impersonate_service_account_delegates,
        cancel=cancel,
    )

    universe_domain = validate_universe_domain(settings.universe_domain, loaded.universe_domain)
    if universe_domain:
        logger.info("Using universe domain", extra={"universe_domain": universe_domain})
    endpoints.replace_domain(universe_domain)
    endpoints.override(settings.custom_endpoints)

    resolved = ResolvedConfiguration(
        auth=auth,
        project=settings.project,
        billing_project=settings.billing_project,
        region=region_from_self_link(settings.region),
        zone=settings.zone,
        scopes=tuple(scopes),
        impersonate_service_account=settings.impersonate_service_account,
        impersonate_service_account_delegates=settings.impersonate_service_account_delegates,
        base_paths=endpoints.snapshot(),
        universe_domain=universe_domain,
        batching=batching,
        default_labels=labels.default_labels,
        add_terraform_attribution_label=labels.add_attribution_label,
        attribution_strategy=labels.strategy,
        request_timeout=request_timeout,
        request_reason=settings.request_reason,
        user_project_override=settings.user_project_override,
        user_agent=build_user_agent(env),
    )
    logger.info(
        "Provider configuration resolved",
        extra={
            "auth_source": auth.kind,
            "project": resolved.project,
            "region": resolved.region,
            "custom_endpoints": sorted(settings.custom_endpoints),
        },
    )
    return resolved


__all__ = [
    "USER_AGENT_EXTENSION_ENV_VAR",
    "assemble_configuration",
    "build_user_agent",
    "region_from_self_link",
]
