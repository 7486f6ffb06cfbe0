"""Notifier family and ordered dispatch.

INVARIANT: one ``send`` call produces exactly one delivery.
"""

from ooplab.notifiers.base import (
    NOTIFIER_REGISTRY,
    ChatNotifier,
    EmailNotifier,
    Notifier,
    SmsNotifier,
    build_notifier,
    get_notifier_class,
)
from ooplab.notifiers.dispatcher import DispatchReport, Dispatcher

__all__ = [
    "NOTIFIER_REGISTRY",
    "ChatNotifier",
    "DispatchReport",
    "Dispatcher",
    "EmailNotifier",
    "Notifier",
    "SmsNotifier",
    "build_notifier",
    "get_notifier_class",
]
