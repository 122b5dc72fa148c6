"""
Raw value parsing helpers shared by the handlers and the normalizer.

Every helper raises ValueParseError (a ValueError) with a field-attributed
message; handlers translate it into a failed ValidationResult.
"""
import math
from decimal import Decimal, InvalidOperation
from numbers import Number
from typing import Any, Optional, Union

from src.config import messages

Numeric = Union[int, float, Decimal]


# Integers at or beyond this magnitude are rejected by parse_integer.
MAX_INTEGER_DIGITS = 18
MAX_INTEGER = 10 ** MAX_INTEGER_DIGITS


class ValueParseError(ValueError):
    """Raised when a raw value cannot be coerced to the expected type."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        self.field_name = field_name
        super().__init__(message)


class ValueTooLargeError(ValueParseError):
    """Raised by parse_integer for magnitudes no page index or size can have."""

    def __init__(self, field_name: str, negative: bool = False) -> None:
        self.negative = negative
        super().__init__(messages.FIELD_TOO_LARGE % field_name, field_name)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_string(value: Any, field_name: str) -> Optional[str]:
    """Return *value* trimmed, ``None`` for ``None``; non-strings are rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueParseError(messages.FIELD_MUST_BE_STRING % field_name, field_name)
    return value.strip()


def parse_number(value: Any, field_name: str) -> Numeric:
    """
    Coerce *value* to a number.

    - ``bool`` is rejected even though it subclasses ``int``.
    - ``int``, ``float`` and ``Decimal`` pass through (NaN/infinity rejected).
    - Strings are trimmed; integral literals become ``int``, anything with a
      decimal point or exponent becomes ``Decimal`` so monetary values keep
      their scale.
    """
    if isinstance(value, bool) or value is None:
        raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)
        return value

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)
        return value

    if isinstance(value, Number):
        # Other numeric tower members (e.g. numpy scalars, Fraction)
        try:
            return Decimal(str(value)) if not float(value).is_integer() else int(value)
        except (TypeError, ValueError, InvalidOperation, OverflowError) as exc:
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name) from exc

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = Decimal(text)
        except InvalidOperation as exc:
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name) from exc
        if not parsed.is_finite():
            raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)
        return parsed

    raise ValueParseError(messages.FIELD_MUST_BE_NUMBER % field_name, field_name)


def parse_integer(value: Any, field_name: str) -> int:
    """
    Coerce *value* to ``int``.

    Integral floats/decimals (``2.0``) are accepted; fractional values and
    non-numeric input are rejected. Magnitudes of 10**18 and above raise
    ValueTooLargeError before any conversion, so exponent literals such as
    ``"1e1000000"`` never expand into huge integers.
    """
    number = parse_number(value, field_name)
    if isinstance(number, Decimal):
        if number.is_zero():
            return 0
        if number.adjusted() >= MAX_INTEGER_DIGITS:
            raise ValueTooLargeError(field_name, negative=number < 0)
        if number != number.to_integral_value():
            raise ValueParseError(messages.FIELD_MUST_BE_INTEGER % field_name, field_name)
        return int(number)
    if isinstance(number, float):
        if abs(number) >= MAX_INTEGER:
            raise ValueTooLargeError(field_name, negative=number < 0)
        if not number.is_integer():
            raise ValueParseError(messages.FIELD_MUST_BE_INTEGER % field_name, field_name)
        return int(number)
    if abs(number) >= MAX_INTEGER:
        raise ValueTooLargeError(field_name, negative=number < 0)
    return int(number)


def decimal_places(number: Numeric) -> int:
    """Number of digits after the decimal point (``12.50`` → 2, ``7`` → 0)."""
    if isinstance(number, int):
        return 0
    as_decimal = number if isinstance(number, Decimal) else Decimal(repr(number))
    exponent = as_decimal.as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def describe(value: Any, limit: int = 40) -> str:
    """Short, always-printable rendering of a raw input for warning messages."""
    if isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > 64:
        return f"<{value.bit_length()}-bit integer>"
    text = value if isinstance(value, str) else repr(value)
    return text if len(text) <= limit else text[: limit - 3] + "..."
