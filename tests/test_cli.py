"""Tests for the root ooplab CLI."""

import pytest
from click.testing import CliRunner

from ooplab import __version__
from ooplab.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "ooplab" in result.output
    for command in ("shapes", "notify", "greet", "product", "account"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_shapes_group_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["shapes", "--help"])
    assert result.exit_code == 0
    assert "measure" in result.output
    assert "kinds" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_no_plugins_skips_entry_points(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    from ooplab.plugins.manager import PluginManager

    def fail(self: PluginManager) -> list[str]:
        raise AssertionError("entry points should not be loaded")

    monkeypatch.setattr(PluginManager, "discover_and_load", fail)
    result = cli_runner.invoke(cli, ["--no-plugins", "-q", "shapes", "kinds"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["circle", "rectangle"]


@pytest.mark.usefixtures("_isolated_cwd")
def test_missing_config_file(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "nope.toml", "shapes", "kinds"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output
