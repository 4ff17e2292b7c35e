"""Configuration assembly: ordering, failure modes and the resolved value."""

from __future__ import annotations

import threading
from datetime import timedelta
from types import MappingProxyType

import pytest

from gcpconf import __init__conf__
from gcpconf.adapters.memory import CredentialSpy, default_endpoints_in_memory
from gcpconf.application.assembler import assemble_configuration, build_user_agent, region_from_self_link
from gcpconf.domain.batching import BatchingPolicy
from gcpconf.domain.credentials import AccessTokenAuth, AmbientAuth, CredentialBlobAuth, env_lookup_from_mapping
from gcpconf.domain.endpoints import DEFAULT_BASE_PATHS
from gcpconf.domain.enums import AttributionStrategy
from gcpconf.domain.errors import (
    ConfigurationCancelledError,
    CredentialLoadError,
    MalformedSettingError,
    UniverseDomainMismatchError,
)
from gcpconf.domain.resolved import DEFAULT_SCOPES
from gcpconf.domain.settings import BatchingSettings, RawSettings

NO_ENV = env_lookup_from_mapping({})


def _assemble(settings: RawSettings, spy: CredentialSpy | None = None, **kwargs: object):  # type: ignore[no-untyped-def]
    return assemble_configuration(
        settings,
        env=kwargs.pop("env", NO_ENV),  # type: ignore[arg-type]
        load_credentials=(spy or CredentialSpy()).load_credentials,
        default_endpoints=default_endpoints_in_memory(),
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.mark.os_agnostic
def test_empty_settings_resolve_to_defaults() -> None:
    resolved = _assemble(RawSettings())

    assert resolved.auth == AmbientAuth()
    assert resolved.universe_domain == ""
    assert resolved.scopes == DEFAULT_SCOPES
    assert resolved.batching == BatchingPolicy.disabled()
    assert resolved.request_timeout == timedelta(0)
    assert resolved.attribution_strategy is AttributionStrategy.CREATE_ONLY
    assert dict(resolved.base_paths) == dict(DEFAULT_BASE_PATHS)


@pytest.mark.os_agnostic
def test_scalar_settings_are_carried_through() -> None:
    settings = RawSettings(
        project="demo",
        billing_project="billing",
        zone="us-central1-a",
        request_reason="ticket-42",
        user_project_override=True,
        scopes=("https://www.googleapis.com/auth/compute",),
        impersonate_service_account="target@demo.iam.gserviceaccount.com",
        impersonate_service_account_delegates=("mid@demo.iam.gserviceaccount.com",),
    )

    resolved = _assemble(settings)

    assert (resolved.project, resolved.billing_project, resolved.zone) == ("demo", "billing", "us-central1-a")
    assert resolved.request_reason == "ticket-42"
    assert resolved.user_project_override is True
    assert resolved.scopes == ("https://www.googleapis.com/auth/compute",)
    assert resolved.impersonate_service_account_delegates == ("mid@demo.iam.gserviceaccount.com",)


@pytest.mark.os_agnostic
def test_credentials_are_loaded_with_scopes_and_impersonation() -> None:
    spy = CredentialSpy()
    settings = RawSettings(
        credentials="{}",
        impersonate_service_account="target@demo.iam.gserviceaccount.com",
        impersonate_service_account_delegates=("a@demo.iam.gserviceaccount.com",),
    )

    _assemble(settings, spy)

    assert len(spy.calls) == 1
    call = spy.calls[0]
    assert call["auth"] == CredentialBlobAuth(credentials="{}")
    assert call["scopes"] == DEFAULT_SCOPES
    assert call["impersonate_service_account"] == "target@demo.iam.gserviceaccount.com"
    assert call["delegates"] == ("a@demo.iam.gserviceaccount.com",)


@pytest.mark.os_agnostic
def test_request_timeout_and_batching_are_parsed() -> None:
    settings = RawSettings(request_timeout="2m", batching=BatchingSettings(send_after="5s", enable_batching=True))

    resolved = _assemble(settings)

    assert resolved.request_timeout == timedelta(minutes=2)
    assert resolved.batching == BatchingPolicy(enabled=True, send_after=timedelta(seconds=5))


@pytest.mark.os_agnostic
def test_malformed_timeout_fails_before_credentials_are_loaded() -> None:
    spy = CredentialSpy()

    with pytest.raises(MalformedSettingError, match="request_timeout"):
        _assemble(RawSettings(request_timeout="soon"), spy)

    assert spy.calls == []


@pytest.mark.os_agnostic
def test_unknown_attribution_strategy_fails_before_credentials_are_loaded() -> None:
    spy = CredentialSpy()

    with pytest.raises(MalformedSettingError):
        _assemble(RawSettings(terraform_attribution_label_addition_strategy="SOMETIMES"), spy)

    assert spy.calls == []


@pytest.mark.os_agnostic
def test_matching_universe_domain_rewrites_every_endpoint() -> None:
    spy = CredentialSpy(universe_domain="example-universe.test")

    resolved = _assemble(RawSettings(universe_domain="example-universe.test"), spy)

    assert resolved.universe_domain == "example-universe.test"
    assert resolved.base_paths["compute"] == "https://compute.example-universe.test/compute/v1/"


@pytest.mark.os_agnostic
def test_universe_mismatch_is_terminal() -> None:
    spy = CredentialSpy(universe_domain="other-universe.test")

    with pytest.raises(UniverseDomainMismatchError) as exc_info:
        _assemble(RawSettings(universe_domain="example-universe.test"), spy)

    assert "example-universe.test" in str(exc_info.value)
    assert "other-universe.test" in str(exc_info.value)


@pytest.mark.os_agnostic
def test_custom_endpoints_are_applied_after_the_domain_rewrite() -> None:
    spy = CredentialSpy(universe_domain="example-universe.test")
    settings = RawSettings(
        universe_domain="example-universe.test",
        custom_endpoints=MappingProxyType({"storage": "https://storage.googleapis.com/custom/v1/"}),
    )

    resolved = _assemble(settings, spy)

    assert resolved.base_paths["storage"] == "https://storage.googleapis.com/custom/v1/"
    assert resolved.base_paths["dns"] == "https://dns.example-universe.test/dns/v1/"


@pytest.mark.os_agnostic
def test_shared_default_snapshot_is_never_mutated() -> None:
    defaults = default_endpoints_in_memory()
    spy = CredentialSpy(universe_domain="example-universe.test")

    assemble_configuration(
        RawSettings(universe_domain="example-universe.test"),
        env=NO_ENV,
        load_credentials=spy.load_credentials,
        default_endpoints=defaults,
    )
    second = assemble_configuration(
        RawSettings(), env=NO_ENV, load_credentials=CredentialSpy().load_credentials, default_endpoints=defaults
    )

    assert dict(defaults) == dict(DEFAULT_BASE_PATHS)
    assert second.base_paths["compute"] == DEFAULT_BASE_PATHS["compute"]


@pytest.mark.os_agnostic
def test_credential_load_errors_pass_through_unmodified() -> None:
    error = CredentialLoadError("key file is not JSON")
    spy = CredentialSpy(raise_exception=error)

    with pytest.raises(CredentialLoadError) as exc_info:
        _assemble(RawSettings(credentials="{}"), spy)

    assert exc_info.value is error


@pytest.mark.os_agnostic
def test_cancellation_surfaces_as_cancelled_error() -> None:
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(ConfigurationCancelledError):
        _assemble(RawSettings(), cancel=cancel)


@pytest.mark.os_agnostic
def test_environment_token_is_used_when_nothing_is_configured() -> None:
    env = env_lookup_from_mapping({"GOOGLE_OAUTH_ACCESS_TOKEN": "env-token"})

    resolved = _assemble(RawSettings(), env=env)

    assert isinstance(resolved.auth, AccessTokenAuth)
    assert resolved.access_token == "env-token"


@pytest.mark.os_agnostic
def test_resolved_configuration_is_frozen() -> None:
    resolved = _assemble(RawSettings(project="demo"))

    with pytest.raises(AttributeError):
        resolved.project = "other"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_display_dict_redacts_secrets() -> None:
    resolved = _assemble(RawSettings(access_token="ya29.secret", credentials='{"type": "service_account"}'))

    shown = resolved.to_display_dict()

    assert shown["auth"] == {"source": "access_token", "access_token": "[REDACTED]", "credentials": "[REDACTED]"}
    assert "ya29.secret" not in repr(resolved)
    assert "ya29.secret" not in str(shown)


@pytest.mark.os_agnostic
def test_user_agent_appends_the_extension() -> None:
    base = f"{__init__conf__.name}/{__init__conf__.version}"

    assert build_user_agent(NO_ENV) == base
    env = env_lookup_from_mapping({"GOOGLE_TERRAFORM_USERAGENT_EXTENSION": "wrapper/2.0"})
    assert build_user_agent(env) == f"{base} wrapper/2.0"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("region", "expected"),
    [
        ("us-central1", "us-central1"),
        ("https://www.googleapis.com/compute/v1/projects/p/regions/europe-west1", "europe-west1"),
        ("https://www.googleapis.com/compute/v1/projects/p/regions/europe-west1/", "europe-west1"),
        ("", ""),
    ],
)
def test_region_self_links_are_reduced_to_names(region: str, expected: str) -> None:
    assert region_from_self_link(region) == expected
