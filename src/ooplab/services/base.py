"""BaseService — abstract foundation for all ooplab services.

Every service receives a :class:`Lab` at construction time.  Domain
exceptions raised inside an operation are converted to failed
``ServiceResult`` objects by :meth:`BaseService._failure`; nothing else
escapes a service method.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ooplab.domain.errors import OoplabError
from ooplab.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from ooplab.infrastructure.lab import Lab

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class GeometryService(BaseService):
            def measure(self, specs) -> ServiceResult:
                try:
                    ...
                except (OoplabError, ValidationError) as exc:
                    return self._failure("measure", exc)
    """

    def __init__(self, lab: Lab) -> None:
        self._lab = lab

    @staticmethod
    def _failure(
        op: str,
        exc: OoplabError | ValidationError,
        *,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Convert a domain or validation error into a failed result."""
        if isinstance(exc, OoplabError):
            error = ServiceError(code=exc.code, message=exc.message, detail=_jsonable(exc.detail))
        else:
            messages = [
                f"{'.'.join(map(str, e['loc'])) or 'input'}: {e['msg']}" for e in exc.errors()
            ]
            error = ServiceError(
                code="VALIDATION_FAILED",
                message="; ".join(messages),
                detail={"errors": len(messages)},
            )
        logger.debug("%s failed: %s", op, error.message)
        return ServiceResult(ok=False, op=op, error=error, data=data or {})

    def _call_hook(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a plugin hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        hook_fn = getattr(self._lab.plugins.hook, hook_name, None)
        if hook_fn is None:
            return
        try:
            hook_fn(**payload)
        except Exception:
            logger.debug("Hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Hook {hook_name} failed")


def _jsonable(detail: dict[str, Any]) -> dict[str, Any]:
    """Stringify detail values that are not plain JSON scalars or lists."""
    out: dict[str, Any] = {}
    for key, value in detail.items():
        if value is None or isinstance(value, (str, int, float, bool, list)):
            out[key] = value
        else:
            out[key] = str(value)
    return out
