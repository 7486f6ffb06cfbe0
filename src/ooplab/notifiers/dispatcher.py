"""Ordered notifier dispatch with hook fan-out.

``notify_all`` invokes ``send`` on every notifier exactly once, in
insertion order.  Around each send the dispatcher calls the
``pre_send`` / ``post_send`` / ``send_failed`` hooks on the plugin
manager, if one was given.

Failure policy:

- default: a raising notifier is recorded in ``DispatchReport.failed``
  and dispatch continues with the next notifier;
- ``stop_on_error=True``: the first failure raises ``DeliveryFailed`` and
  the remaining notifiers are not invoked.

INVARIANT: Hook failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ooplab.domain.errors import DeliveryFailed

if TYPE_CHECKING:
    from ooplab.notifiers.base import Notifier
    from ooplab.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

NO_NOTIFIERS_WARNING = "No notifiers registered"


@dataclass
class DispatchReport:
    """Outcome of one ``notify_all`` call."""

    message: str
    delivered: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "delivered": list(self.delivered),
            "failed": [{"channel": ch, "error": err} for ch, err in self.failed],
            "count": len(self.delivered),
        }


class Dispatcher:
    """Holds an ordered sequence of notifiers and fans a message out to them.

    Parameters:
        notifiers: Initial notifiers, dispatched in the given order.
        hooks: Plugin manager whose hook relay receives send events.
        stop_on_error: Raise on the first failed send instead of continuing.
    """

    def __init__(
        self,
        notifiers: Iterable[Notifier] = (),
        *,
        hooks: PluginManager | None = None,
        stop_on_error: bool = False,
    ) -> None:
        self._notifiers: list[Notifier] = list(notifiers)
        self._hooks = hooks
        self._stop_on_error = stop_on_error

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def notifiers(self) -> list[Notifier]:
        return list(self._notifiers)

    def add(self, notifier: Notifier) -> None:
        """Append *notifier*; it runs after all previously added ones."""
        self._notifiers.append(notifier)

    def __len__(self) -> int:
        return len(self._notifiers)

    def notify_all(self, message: str) -> DispatchReport:
        """Send *message* through every notifier in insertion order."""
        report = DispatchReport(message=message)
        if not self._notifiers:
            report.warnings.append(NO_NOTIFIERS_WARNING)
            return report

        for notifier in self._notifiers:
            channel = str(notifier.channel)
            self._call_hook("pre_send", report.warnings, channel=channel, message=message)
            try:
                notifier.send(message)
            except Exception as exc:
                logger.debug("Notifier %r failed", notifier, exc_info=True)
                report.failed.append((channel, str(exc)))
                self._call_hook(
                    "send_failed",
                    report.warnings,
                    channel=channel,
                    message=message,
                    error=str(exc),
                )
                if self._stop_on_error:
                    raise DeliveryFailed(channel, exc) from exc
                continue
            report.delivered.append(channel)
            self._call_hook(
                "post_send",
                report.warnings,
                channel=channel,
                recipient=notifier.recipient,
                message=message,
            )
        return report

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _call_hook(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Fire a hook. No-op without a plugin manager; failures become warnings."""
        if self._hooks is None:
            return
        hook_fn = getattr(self._hooks.hook, hook_name, None)
        if hook_fn is None:
            return
        try:
            hook_fn(**payload)
        except Exception:
            logger.warning("Hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Hook {hook_name} failed")
