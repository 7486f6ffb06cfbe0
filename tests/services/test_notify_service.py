"""Tests for NotifyService.broadcast."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

import pytest

from ooplab.config.settings import OoplabSettings
from ooplab.infrastructure.lab import Lab
from ooplab.infrastructure.outbox import Delivery
from ooplab.notifiers.base import NOTIFIER_REGISTRY, Notifier
from ooplab.services.notify import NotifyService


class BrokenNotifier(Notifier):
    channel: ClassVar[str] = "broken"

    def _deliver(self, message: str) -> Delivery:
        msg = "gateway timeout"
        raise RuntimeError(msg)


@pytest.fixture
def broken_channel(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(NOTIFIER_REGISTRY, "broken", BrokenNotifier)


class TestBroadcast:
    def test_default_channels_in_order(self, lab: Lab) -> None:
        result = NotifyService(lab).broadcast("Sistema atualizado!")
        assert result.ok
        assert result.op == "notify"
        assert result.data["delivered"] == ["email", "chat", "sms"]
        assert result.data["count"] == 3
        deliveries = result.data["deliveries"]
        assert [d["message"] for d in deliveries] == ["Sistema atualizado!"] * 3
        assert [d["recipient"] for d in deliveries] == [
            "admin@localhost",
            "#general",
            "+0000000000",
        ]

    def test_explicit_channels(self, lab: Lab) -> None:
        result = NotifyService(lab).broadcast("hi", ["sms", "email"])
        assert result.data["delivered"] == ["sms", "email"]
        assert [d.channel for d in lab.outbox.deliveries] == ["sms", "email"]

    def test_configured_recipients(self, tmp_path: Path) -> None:
        (tmp_path / "ooplab.toml").write_text(
            '[notify]\nchannels = ["chat"]\nchat_room = "#releases"\n'
        )
        lab = Lab(OoplabSettings.from_cli(start=tmp_path))
        result = NotifyService(lab).broadcast("v1.0 shipped")
        assert result.data["deliveries"][0]["recipient"] == "#releases"

    def test_deliveries_only_from_this_call(self, lab: Lab) -> None:
        service = NotifyService(lab)
        service.broadcast("first", ["email"])
        result = service.broadcast("second", ["chat"])
        assert [d["message"] for d in result.data["deliveries"]] == ["second"]

    def test_unknown_channel(self, lab: Lab) -> None:
        result = NotifyService(lab).broadcast("hi", ["email", "fax"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_VARIANT"
        assert len(lab.outbox) == 0

    def test_no_channels_configured(self, tmp_path: Path) -> None:
        (tmp_path / "ooplab.toml").write_text("[notify]\nchannels = []\n")
        lab = Lab(OoplabSettings.from_cli(start=tmp_path))
        result = NotifyService(lab).broadcast("hi")
        assert result.ok
        assert result.data["count"] == 0
        assert result.warnings == ["No notifiers registered"]

    def test_audit_plugin_sees_every_send(self, lab: Lab) -> None:
        NotifyService(lab).broadcast("hi")
        assert [e.channel for e in lab.audit.events("post_send")] == ["email", "chat", "sms"]


@pytest.mark.usefixtures("broken_channel")
class TestFailures:
    def test_partial_delivery(self, lab: Lab) -> None:
        result = NotifyService(lab).broadcast("hi", ["email", "broken", "sms"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARTIAL_DELIVERY"
        assert result.error.detail == {"failed": ["broken"]}
        assert result.data["delivered"] == ["email", "sms"]
        assert lab.audit.events("send_failed")[0].detail == "gateway timeout"

    def test_stop_on_error(self, lab: Lab) -> None:
        result = NotifyService(lab).broadcast(
            "hi", ["email", "broken", "sms"], stop_on_error=True
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DELIVERY_FAILED"
        assert result.data["delivered"] == ["email"]

    def test_stop_on_error_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "ooplab.toml").write_text("[notify]\nstop_on_error = true\n")
        lab = Lab(OoplabSettings.from_cli(start=tmp_path))
        result = NotifyService(lab).broadcast("hi", ["broken", "email"])
        assert result.error is not None
        assert result.error.code == "DELIVERY_FAILED"
        assert len(lab.outbox) == 0
