"""NotifyService — broadcast a message through configured channels."""

from __future__ import annotations

from collections.abc import Sequence

from ooplab.domain.errors import DeliveryFailed, OoplabError
from ooplab.services.base import BaseService
from ooplab.services.result import ServiceError, ServiceResult


class NotifyService(BaseService):
    """Builds a dispatcher from the Lab and runs ``notify_all``."""

    def broadcast(
        self,
        message: str,
        channels: Sequence[str] | None = None,
        *,
        stop_on_error: bool | None = None,
    ) -> ServiceResult:
        """Send *message* through *channels* (default: ``[notify] channels``).

        A partially failed broadcast is ``ok=False`` with code
        ``PARTIAL_DELIVERY``; the data still lists what was delivered.
        """
        op = "notify"
        try:
            dispatcher = self._lab.dispatcher(channels, stop_on_error=stop_on_error)
        except OoplabError as exc:
            return self._failure(op, exc)

        outbox = self._lab.outbox
        start = len(outbox)
        try:
            report = dispatcher.notify_all(message)
        except DeliveryFailed as exc:
            sent = outbox.deliveries[start:]
            return self._failure(
                op,
                exc,
                data={"message": message, "delivered": [d.channel for d in sent]},
            )

        data = report.to_dict()
        data["deliveries"] = [d.to_dict() for d in outbox.deliveries[start:]]
        if report.ok:
            return ServiceResult(ok=True, op=op, data=data, warnings=report.warnings)

        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=report.warnings,
            error=ServiceError(
                code="PARTIAL_DELIVERY",
                message=f"{len(report.failed)} of {len(dispatcher)} notifiers failed",
                detail={"failed": [ch for ch, _ in report.failed]},
            ),
        )
