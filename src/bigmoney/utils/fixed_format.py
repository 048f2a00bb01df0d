from __future__ import annotations

import re

from bigmoney.domain.monetary.errors import DomainError
from bigmoney.domain.monetary.rounding import Round
from bigmoney.utils.math import divide, trunc_divmod
from bigmoney.utils.scaled_tools import SCALE, SCALE_FACTOR

_TRAILING_ZEROS_PATTERN = re.compile(r"\.?0+$")


def to_fixed_string(value: int, precision: int, round: Round) -> str:
    """Render scaled integer $value as a decimal string with exactly $precision fractional digits.

    Digits beyond $precision are rounded away with $round; when more digits are
    requested than SCALE keeps, the output is padded with zeros. A rounding
    carry propagates into the whole part (0.995 -> "1.00").

    A zero whole part of a negative value renders as "-0" (e.g. "-0.01", and
    also "-0.00" when a tiny negative value rounds to zero).

    Args:
        value: Scaled integer (human value * 10**SCALE).
        precision: Number of fractional digits, >= 0.
        round: Rounding policy for dropped digits.

    Returns:
        The formatted string, e.g. "1.00" or "-12.345".

    Raises:
        DomainError: If $precision is not a non-negative int.

    Examples:
        >>> to_fixed_string(10**SCALE, 2, Round.HALF_TO_EVEN)
        '1.00'
    """
    # Raise: precision is a digit count
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise DomainError(f"Cannot call `to_fixed_string` because $precision ({precision!r}) is not a non-negative integer")

    if precision == 0:
        return str(divide(value, SCALE_FACTOR, round))

    whole, remainder = trunc_divmod(value, SCALE_FACTOR)
    negative = value < 0

    if precision > SCALE:
        remainder *= 10 ** (precision - SCALE)
    else:
        remainder = divide(remainder, 10 ** (SCALE - precision), round)

    remainder_str = str(abs(remainder)).rjust(precision, "0")

    if len(remainder_str) > precision:
        # Fractional digits rounded up all the way into the whole part
        whole += -1 if negative else 1
        remainder_str = "0" * precision

    whole_str = str(whole)
    if whole == 0 and negative:
        whole_str = "-0"

    return f"{whole_str}.{remainder_str}"


def strip_trailing_zeros(text: str) -> str:
    """Remove trailing fractional zeros and a bare trailing point: "1.50" -> "1.5", "2.00" -> "2"."""
    if "." not in text:
        return text
    return _TRAILING_ZEROS_PATTERN.sub("", text)
