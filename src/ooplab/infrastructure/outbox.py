"""In-memory delivery log — the observable effect of every ``send``.

Each notifier appends exactly one :class:`Delivery` per call.  The outbox
preserves insertion order, so the sequence of deliveries mirrors the
order in which a dispatcher invoked its notifiers.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


def now_iso() -> str:
    """Current UTC time as standard ISO 8601."""
    return datetime.now(UTC).isoformat()


@dataclass(frozen=True)
class Delivery:
    """One message handed to one channel."""

    channel: str
    recipient: str
    message: str
    sent_at: str = field(default_factory=now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "recipient": self.recipient,
            "message": self.message,
            "sent_at": self.sent_at,
        }


class Outbox:
    """Ordered, thread-safe store of :class:`Delivery` records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._deliveries: list[Delivery] = []

    def record(self, delivery: Delivery) -> None:
        with self._lock:
            self._deliveries.append(delivery)

    @property
    def deliveries(self) -> list[Delivery]:
        """Snapshot of all deliveries in insertion order."""
        with self._lock:
            return list(self._deliveries)

    def for_channel(self, channel: str) -> list[Delivery]:
        return [d for d in self.deliveries if d.channel == channel]

    def clear(self) -> None:
        with self._lock:
            self._deliveries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._deliveries)

    def __iter__(self) -> Iterator[Delivery]:
        return iter(self.deliveries)
