"""Variant kinds for the shape and notifier families."""

from __future__ import annotations

from enum import StrEnum


class ShapeKind(StrEnum):
    """Built-in shape variants."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class Channel(StrEnum):
    """Notification channels. ``sms`` is the text-message channel."""

    EMAIL = "email"
    CHAT = "chat"
    SMS = "sms"
