"""Domain-level exceptions.

Every error raised by the library derives from :class:`OoplabError` and
carries a stable ``code`` so the service layer can convert it into a
``ServiceError`` without string matching.
"""

from __future__ import annotations

from typing import Any


class OoplabError(Exception):
    """Base class for all ooplab errors."""

    code: str = "OOPLAB_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class UnimplementedOperation(OoplabError, NotImplementedError):
    """An abstract operation was invoked on a form that does not override it."""

    code = "UNIMPLEMENTED"

    def __init__(self, type_name: str, operation: str) -> None:
        super().__init__(
            f"{type_name} does not implement '{operation}'",
            type=type_name,
            operation=operation,
        )
        self.type_name = type_name
        self.operation = operation


class InvalidDimension(OoplabError):
    """A shape dimension is negative, non-finite, or a disallowed zero."""

    code = "INVALID_DIMENSION"

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid {field}={value!r}: {reason}", field=field, value=value)
        self.field = field
        self.value = value


class UnknownVariant(OoplabError):
    """A registry lookup named a kind or channel nobody registered."""

    code = "UNKNOWN_VARIANT"

    def __init__(self, family: str, name: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown {family} '{name}' (known: {', '.join(sorted(known))})",
            family=family,
            name=name,
            known=sorted(known),
        )
        self.name = name


class InvalidAmount(OoplabError):
    """An account operation was given a non-positive amount."""

    code = "INVALID_AMOUNT"


class InsufficientFunds(OoplabError):
    """A withdrawal would overdraw the account."""

    code = "INSUFFICIENT_FUNDS"


class InvalidEntity(OoplabError):
    """An entity field failed validation (blank name, negative price)."""

    code = "INVALID_ENTITY"


class DeliveryFailed(OoplabError):
    """A notifier raised while sending."""

    code = "DELIVERY_FAILED"

    def __init__(self, channel: str, error: BaseException) -> None:
        super().__init__(f"Delivery via {channel} failed: {error}", channel=channel)
        self.channel = channel
        self.error = error


class MeasurementOverflow(OoplabError):
    """A valid shape's area or perimeter does not fit in a float."""

    code = "MEASUREMENT_OVERFLOW"

    def __init__(self, kind: str, index: int, measure: str) -> None:
        super().__init__(
            f"Shape {index} ({kind}) {measure} is too large to represent",
            kind=kind,
            index=index,
            measure=measure,
        )
        self.index = index
