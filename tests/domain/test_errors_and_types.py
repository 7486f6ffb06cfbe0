"""Tests for the error taxonomy and variant enums."""

import pytest

from ooplab.domain.errors import (
    DeliveryFailed,
    InsufficientFunds,
    InvalidAmount,
    InvalidDimension,
    InvalidEntity,
    MeasurementOverflow,
    OoplabError,
    UnimplementedOperation,
    UnknownVariant,
)
from ooplab.domain.types import Channel, ShapeKind

ENUM_CASES = [
    (ShapeKind, {"rectangle", "circle"}),
    (Channel, {"email", "chat", "sms"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


ERROR_CODES = [
    (UnimplementedOperation("Shape", "area"), "UNIMPLEMENTED"),
    (InvalidDimension("radius", -1, "must not be negative"), "INVALID_DIMENSION"),
    (UnknownVariant("shape", "hexagon", ["circle"]), "UNKNOWN_VARIANT"),
    (InvalidAmount("bad"), "INVALID_AMOUNT"),
    (InsufficientFunds("low"), "INSUFFICIENT_FUNDS"),
    (InvalidEntity("blank"), "INVALID_ENTITY"),
    (DeliveryFailed("email", RuntimeError("down")), "DELIVERY_FAILED"),
    (MeasurementOverflow("circle", 0, "area"), "MEASUREMENT_OVERFLOW"),
]


@pytest.mark.parametrize(
    "error,code",
    ERROR_CODES,
    ids=[type(e).__name__ for e, _ in ERROR_CODES],
)
def test_error_codes(error: OoplabError, code: str) -> None:
    assert isinstance(error, OoplabError)
    assert error.code == code
    assert str(error) == error.message


class TestErrorMessages:
    def test_unimplemented_names_type_and_operation(self) -> None:
        err = UnimplementedOperation("Shape", "perimeter")
        assert "Shape" in err.message
        assert "perimeter" in err.message
        assert err.detail == {"type": "Shape", "operation": "perimeter"}

    def test_unknown_variant_lists_known_sorted(self) -> None:
        err = UnknownVariant("channel", "fax", ["sms", "email"])
        assert "email, sms" in err.message
        assert err.name == "fax"

    def test_delivery_failed_keeps_cause(self) -> None:
        cause = RuntimeError("smtp down")
        err = DeliveryFailed("email", cause)
        assert err.error is cause
        assert err.channel == "email"
        assert "smtp down" in err.message
