"""Tests for the notify command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ooplab.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestNotify:
    def test_scenario_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "notify", "Sistema atualizado!"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["delivered"] == ["email", "chat", "sms"]
        assert [d["message"] for d in data["data"]["deliveries"]] == ["Sistema atualizado!"] * 3

    def test_human_output_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["notify", "hello"])
        assert result.exit_code == 0
        out = result.stdout
        assert out.index("email") < out.index("chat") < out.index("sms")

    def test_channel_option_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "notify", "hi", "--channel", "sms", "--channel", "chat"]
        )
        assert result.exit_code == 0
        assert result.stdout.split() == ["sms", "chat"]

    def test_unknown_channel(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["notify", "hi", "--channel", "fax"])
        assert result.exit_code == 1
        assert "Unknown channel" in result.output

    def test_channels_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "ooplab.toml").write_text(
            '[notify]\nchannels = ["chat"]\nchat_room = "#deploys"\n'
        )
        result = cli_runner.invoke(cli, ["--json", "notify", "shipped"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["delivered"] == ["chat"]
        assert data["data"]["deliveries"][0]["recipient"] == "#deploys"

    def test_empty_channel_list_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "ooplab.toml").write_text("[notify]\nchannels = []\n")
        result = cli_runner.invoke(cli, ["notify", "hi"])
        assert result.exit_code == 0
        assert "No notifiers registered" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["notify", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
