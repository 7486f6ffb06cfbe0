"""Notifier contract and the built-in channel variants.

A notifier accepts a message string and produces one observable effect:
a :class:`~ooplab.infrastructure.outbox.Delivery` recorded in the
:class:`~ooplab.infrastructure.outbox.Outbox` it was constructed with,
plus a ``notification sent`` log event.  ``send`` returns nothing.

The outbox is injected rather than inherited so cross-cutting behaviour
stays in collaborators (the outbox, hook plugins) instead of mixins.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from ooplab.domain.errors import UnimplementedOperation, UnknownVariant
from ooplab.domain.types import Channel
from ooplab.infrastructure.outbox import Delivery, Outbox

logger = logging.getLogger(__name__)


class Notifier:
    """Base notifier. Concrete variants set ``channel`` and override ``_deliver``."""

    channel: ClassVar[str] = ""
    default_recipient: ClassVar[str] = ""

    def __init__(self, outbox: Outbox, recipient: str | None = None) -> None:
        self._outbox = outbox
        self.recipient = recipient or self.default_recipient

    def send(self, message: str) -> None:
        """Deliver *message* through this notifier's channel."""
        if not isinstance(message, str):
            msg = f"Message must be a string, got {type(message).__name__}"
            raise TypeError(msg)
        delivery = self._deliver(message)
        self._outbox.record(delivery)
        logger.info(
            "notification sent",
            extra={
                "channel": delivery.channel,
                "recipient": delivery.recipient,
                "text": delivery.message,
            },
        )

    def _deliver(self, message: str) -> Delivery:
        raise UnimplementedOperation(type(self).__name__, "send")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(recipient={self.recipient!r})"


class EmailNotifier(Notifier):
    channel: ClassVar[str] = Channel.EMAIL
    default_recipient: ClassVar[str] = "admin@localhost"

    def _deliver(self, message: str) -> Delivery:
        return Delivery(channel=self.channel, recipient=self.recipient, message=message)


class ChatNotifier(Notifier):
    channel: ClassVar[str] = Channel.CHAT
    default_recipient: ClassVar[str] = "#general"

    def _deliver(self, message: str) -> Delivery:
        return Delivery(channel=self.channel, recipient=self.recipient, message=message)


class SmsNotifier(Notifier):
    """Text-message notifier."""

    channel: ClassVar[str] = Channel.SMS
    default_recipient: ClassVar[str] = "+0000000000"

    def _deliver(self, message: str) -> Delivery:
        return Delivery(channel=self.channel, recipient=self.recipient, message=message)


NOTIFIER_REGISTRY: dict[str, type[Notifier]] = {
    Channel.EMAIL.value: EmailNotifier,
    Channel.CHAT.value: ChatNotifier,
    Channel.SMS.value: SmsNotifier,
}


def get_notifier_class(channel: str) -> type[Notifier]:
    """Look up a notifier variant by channel. Raises ``UnknownVariant``."""
    try:
        return NOTIFIER_REGISTRY[channel.strip().lower()]
    except KeyError:
        raise UnknownVariant("channel", channel, list(NOTIFIER_REGISTRY)) from None


def build_notifier(channel: str, outbox: Outbox, *, recipient: str | None = None) -> Notifier:
    return get_notifier_class(channel)(outbox, recipient=recipient)
