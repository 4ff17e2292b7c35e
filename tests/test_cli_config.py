"""CLI config stories: display, JSON format, sections and profile handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import orjson
import pytest
from click.testing import CliRunner, Result

from gcpconf.adapters import cli as cli_mod

if TYPE_CHECKING:
    from conftest import InMemoryHarness


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_configuration(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The bundled defaults are displayed without error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=production_factory)

    assert result.exit_code == 0


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """config --format json prints a JSON document."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_shows_provider_section_it_lists_its_keys(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Human output contains the provider section and its values."""
    factory = config_cli_context({"provider": {"project": "demo", "region": "us-central1"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "provider" in result.output
    assert "demo" in result.output
    assert "us-central1" in result.output


@pytest.mark.os_agnostic
def test_when_config_json_section_is_requested_only_that_section_is_shown(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """--section limits the JSON output to one section."""
    factory = config_cli_context(
        {"provider": {"project": "demo", "default_labels": {"team": "infra"}}, "lib_log_rich": {"environment": "dev"}}
    )

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", "json", "--section", "provider"], obj=factory
    )

    assert result.exit_code == 0
    assert '"project": "demo"' in result.stdout
    assert '"team": "infra"' in result.stdout
    assert "lib_log_rich" not in result.stdout


@pytest.mark.os_agnostic
def test_when_config_section_is_missing_it_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """An unknown section exits with INVALID_ARGUMENT (22)."""
    factory = config_cli_context({"provider": {"project": "demo"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nonexistent"], obj=factory)

    assert result.exit_code == 22
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_profile_it_reloads_for_that_profile(
    cli_runner: CliRunner,
    in_memory: InMemoryHarness,
) -> None:
    """config --profile asks get_config for the named profile."""
    in_memory.config.data = {"provider": {"project": "demo"}}

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "staging"], obj=in_memory.factory())

    assert result.exit_code == 0
    assert in_memory.config.profiles == [None, "staging"]


@pytest.mark.os_agnostic
def test_when_root_profile_is_given_it_is_used_once(
    cli_runner: CliRunner,
    in_memory: InMemoryHarness,
) -> None:
    """The root --profile loads configuration once; config does not reload."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "production", "config"], obj=in_memory.factory())

    assert result.exit_code == 0
    assert in_memory.config.profiles == ["production"]


@pytest.mark.os_agnostic
def test_when_config_profile_reloads_it_reapplies_root_overrides(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Root --set overrides survive a subcommand-level profile reload."""
    factory = config_cli_context({"provider": {"region": "us-central1"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "provider.region=europe-west1", "config", "--profile", "test", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "europe-west1" in result.stdout
    assert "us-central1" not in result.stdout


@pytest.mark.os_agnostic
def test_when_config_has_no_profile_it_shows_the_overridden_config(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Without a subcommand profile the stored, overridden configuration is shown."""
    factory = config_cli_context({"provider": {"project": "original"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--set", "provider.project=overridden", "config", "--format", "json"], obj=factory
    )

    assert result.exit_code == 0
    payload = orjson.loads(result.stdout)
    assert payload["provider"]["project"] == "overridden"
