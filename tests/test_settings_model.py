"""Provider settings schema: coercion, validation and conversion to RawSettings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gcpconf.adapters.config.settings import ProviderSettingsModel, apply_env_defaults, load_provider_settings
from gcpconf.domain.credentials import env_lookup_from_mapping
from gcpconf.domain.settings import BatchingSettings, ExternalCredential

NO_ENV = env_lookup_from_mapping({})

EXTERNAL = {
    "audience": "//iam.googleapis.com/projects/1/locations/global/workloadIdentityPools/p/providers/gh",
    "service_account_email": "deployer@demo.iam.gserviceaccount.com",
    "identity_token": "eyJhbGciOi",
}


@pytest.mark.os_agnostic
def test_empty_section_produces_default_settings() -> None:
    settings = ProviderSettingsModel().to_raw_settings()

    assert settings.project == ""
    assert settings.universe_domain is None
    assert settings.batching is None
    assert settings.add_terraform_attribution_label is True
    assert dict(settings.custom_endpoints) == {}


@pytest.mark.os_agnostic
def test_custom_endpoint_keys_are_folded_into_one_mapping() -> None:
    model = ProviderSettingsModel.model_validate(
        {
            "compute_custom_endpoint": "https://compute.example.test/compute/beta/",
            "storage_custom_endpoint": "",
            "custom_endpoints": {"dns": "https://dns.example.test/dns/v1/"},
        }
    )

    assert model.custom_endpoints == {
        "dns": "https://dns.example.test/dns/v1/",
        "compute": "https://compute.example.test/compute/beta/",
    }


@pytest.mark.os_agnostic
def test_custom_endpoint_without_version_path_is_rejected() -> None:
    with pytest.raises(ValidationError, match="trailing slash"):
        ProviderSettingsModel.model_validate({"compute_custom_endpoint": "https://compute.example.test"})


@pytest.mark.os_agnostic
def test_custom_endpoint_for_unknown_service_is_rejected() -> None:
    with pytest.raises(ValidationError, match="unknown service"):
        ProviderSettingsModel.model_validate({"teleport_custom_endpoint": "https://t.example.test/v1/"})


@pytest.mark.os_agnostic
def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ProviderSettingsModel.model_validate({"projcet": "typo"})


@pytest.mark.os_agnostic
def test_two_auth_fields_are_mutually_exclusive() -> None:
    with pytest.raises(ValidationError, match="only one of"):
        ProviderSettingsModel.model_validate({"access_token": "tok", "external_credentials": EXTERNAL})


@pytest.mark.os_agnostic
def test_external_credentials_accept_a_single_element_list() -> None:
    settings = ProviderSettingsModel.model_validate({"external_credentials": [EXTERNAL]}).to_raw_settings()

    assert settings.external_credentials == ExternalCredential(**EXTERNAL)


@pytest.mark.os_agnostic
def test_external_credentials_reject_two_blocks() -> None:
    with pytest.raises(ValidationError, match="at most one block"):
        ProviderSettingsModel.model_validate({"external_credentials": [EXTERNAL, EXTERNAL]})


@pytest.mark.os_agnostic
def test_external_credentials_require_every_field() -> None:
    incomplete = {key: value for key, value in EXTERNAL.items() if key != "identity_token"}

    with pytest.raises(ValidationError):
        ProviderSettingsModel.model_validate({"external_credentials": incomplete})


@pytest.mark.os_agnostic
def test_batching_block_fills_schema_defaults() -> None:
    settings = ProviderSettingsModel.model_validate({"batching": {}}).to_raw_settings()

    assert settings.batching == BatchingSettings(send_after="10s", enable_batching=True)


@pytest.mark.os_agnostic
def test_single_scope_string_becomes_a_list() -> None:
    model = ProviderSettingsModel.model_validate({"scopes": "https://www.googleapis.com/auth/compute"})

    assert model.scopes == ["https://www.googleapis.com/auth/compute"]


@pytest.mark.os_agnostic
def test_blank_strings_count_as_unset() -> None:
    model = ProviderSettingsModel.model_validate({"project": "  ", "universe_domain": ""})

    assert model.project is None
    assert model.universe_domain is None


@pytest.mark.os_agnostic
def test_inline_json_credentials_must_be_an_object() -> None:
    with pytest.raises(ValidationError, match="must be an object"):
        ProviderSettingsModel.model_validate({"credentials": "[1, 2]"})


@pytest.mark.os_agnostic
def test_credentials_that_are_neither_file_nor_json_are_rejected() -> None:
    with pytest.raises(ValidationError, match="existing file"):
        ProviderSettingsModel.model_validate({"credentials": "/no/such/key.json"})


@pytest.mark.os_agnostic
def test_credentials_may_name_an_existing_file(tmp_path: Path) -> None:
    key = tmp_path / "key.json"
    key.write_text("{}", encoding="utf-8")

    assert ProviderSettingsModel.model_validate({"credentials": str(key)}).credentials == str(key)


@pytest.mark.os_agnostic
def test_inline_json_longer_than_a_file_name_is_accepted() -> None:
    """A key whose text has no slash for hundreds of bytes is still inline JSON, not a path."""
    blob = '{"type": "authorized_user", "client_id": "' + "a" * 400 + '"}'

    settings = load_provider_settings({"provider": {"credentials": blob}}, env=NO_ENV)

    assert settings.credentials == blob


@pytest.mark.os_agnostic
def test_repr_redacts_secret_fields() -> None:
    model = ProviderSettingsModel(access_token="ya29.secret-token")

    assert "ya29.secret-token" not in repr(model)
    assert "access_token='[REDACTED]'" in repr(model)


@pytest.mark.os_agnostic
def test_environment_fills_only_unset_fields() -> None:
    env = env_lookup_from_mapping({"GOOGLE_PROJECT": "from-env", "GOOGLE_REGION": "us-east1"})

    merged = apply_env_defaults({"project": "explicit"}, env)

    assert merged == {"project": "explicit", "region": "us-east1"}


@pytest.mark.os_agnostic
def test_load_provider_settings_reads_the_provider_section() -> None:
    env = env_lookup_from_mapping({"CLOUDSDK_COMPUTE_ZONE": "us-east1-b", "USER_PROJECT_OVERRIDE": "true"})

    settings = load_provider_settings({"provider": {"project": "demo", "default_labels": {"team": "infra"}}}, env=env)

    assert settings.project == "demo"
    assert settings.zone == "us-east1-b"
    assert settings.user_project_override is True
    assert dict(settings.default_labels) == {"team": "infra"}


@pytest.mark.os_agnostic
def test_load_provider_settings_without_section_uses_defaults() -> None:
    assert load_provider_settings({}, env=NO_ENV).project == ""


@pytest.mark.os_agnostic
def test_load_provider_settings_rejects_a_scalar_section() -> None:
    with pytest.raises(ValidationError):
        load_provider_settings({"provider": "invalid"}, env=NO_ENV)
