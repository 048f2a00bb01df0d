from __future__ import annotations

from decimal import Decimal
from typing import Protocol, TypeAlias, runtime_checkable

# Largest integer magnitude a float-backed number type holds without losing whole units
MAX_SAFE_INTEGER = 2**53 - 1


class BigInt(int):
    """Whole amount of arbitrary size, exempt from the safe-integer range check.

    A bare `int` passed as an amount must fit into ±$MAX_SAFE_INTEGER. Wrap it in
    `BigInt` to state that the value is intentionally large, e.g. `BigInt(10**30)`.
    """

    def __repr__(self) -> str:
        return f"BigInt({int(self)})"


@runtime_checkable
class ScaledSource(Protocol):
    """Anything that already holds a scaled integer (e.g. `Money`)."""

    def to_source(self) -> int:
        ...


# Use where a monetary amount is expected; every variant is converted to one scaled integer
AmountLike: TypeAlias = ScaledSource | BigInt | int | float | Decimal | str


def is_safe_integer(value: object) -> bool:
    """Return True if $value is a whole number within ±$MAX_SAFE_INTEGER.

    Accepts `int` and integral `float` values. `bool` is rejected even though it
    subclasses `int`.
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    if isinstance(value, float):
        return value.is_integer() and -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    return False


def decimal_to_plain_str(value: Decimal) -> str:
    """Render $value in positional notation (no exponent), e.g. `Decimal("1E+3")` -> "1000".

    Non-finite values are returned as their usual text ("NaN", "Infinity") and are
    left for the caller to reject.
    """
    if not value.is_finite():
        return str(value)

    return format(value, "f")
