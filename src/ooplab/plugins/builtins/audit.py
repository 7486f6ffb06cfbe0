"""Built-in audit plugin — logs and records every send attempt.

This is the composed replacement for a "log on notify" mixin: notifiers
know nothing about auditing, the dispatcher fires hooks, and this plugin
listens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pluggy

hookimpl = pluggy.HookimplMarker("ooplab")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditEntry:
    event: str
    channel: str
    message: str
    detail: str = ""


class AuditPlugin:
    """Keeps an in-memory trail of send events."""

    def __init__(self) -> None:
        self.trail: list[AuditEntry] = []

    @hookimpl
    def pre_send(self, channel: str, message: str) -> None:
        self.trail.append(AuditEntry("pre_send", channel, message))

    @hookimpl
    def post_send(self, channel: str, recipient: str, message: str) -> None:
        self.trail.append(AuditEntry("post_send", channel, message, recipient))
        logger.debug("audit: delivered", extra={"channel": channel, "recipient": recipient})

    @hookimpl
    def send_failed(self, channel: str, message: str, error: str) -> None:
        self.trail.append(AuditEntry("send_failed", channel, message, error))
        logger.warning("audit: delivery failed", extra={"channel": channel, "error": error})

    def events(self, event: str) -> list[AuditEntry]:
        return [entry for entry in self.trail if entry.event == event]
