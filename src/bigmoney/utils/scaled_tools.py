from __future__ import annotations

import logging
import re
from decimal import Decimal

from bigmoney.domain.monetary.errors import FormatError, UnsafeIntegerError
from bigmoney.domain.monetary.rounding import Round
from bigmoney.utils.math import divide
from bigmoney.utils.numeric_tools import AmountLike, BigInt, ScaledSource, decimal_to_plain_str, is_safe_integer

logger = logging.getLogger(__name__)

# Number of fractional digits kept internally
SCALE = 20

# Multiplication factor between a human value and its scaled integer
SCALE_FACTOR = 10**SCALE

_DECIMAL_PATTERN = re.compile(r"(-)?([0-9]*)(?:\.([0-9]*))?")


def to_scaled(value: AmountLike, round: Round) -> int:
    """Convert an amount into its scaled integer (value * 10**SCALE).

    Accepted inputs:
        * `ScaledSource` (e.g. `Money`): its scaled integer, returned unchanged.
        * `BigInt`: a whole amount of any size.
        * `int` or integral `float`: a whole amount within ±MAX_SAFE_INTEGER.
        * `Decimal`: converted through its plain string form.
        * `str`: a decimal number like "-12.34", ".5", "7." or "7".

    Strings with more than SCALE fractional digits are rounded to SCALE digits
    using $round.

    Args:
        value: Amount to convert.
        round: Rounding policy for strings that carry too many fractional digits.

    Returns:
        The scaled integer.

    Raises:
        FormatError: If a string (or Decimal) is not a plain decimal number.
        UnsafeIntegerError: If an `int`/`float` is not a safe integer.
        TypeError: If $value has an unsupported type.
    """
    if isinstance(value, ScaledSource):
        return value.to_source()

    if isinstance(value, BigInt):
        return int(value) * SCALE_FACTOR

    if isinstance(value, str):
        return parse_decimal_str(value, round)

    if isinstance(value, Decimal):
        return parse_decimal_str(decimal_to_plain_str(value), round)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Raise: machine numbers must be whole and exactly representable
        if not is_safe_integer(value):
            raise UnsafeIntegerError(value)
        return int(value) * SCALE_FACTOR

    raise TypeError(f"Cannot call `to_scaled` because $value ({value!r}) must be Money, BigInt, a safe integer, Decimal or str")


def parse_decimal_str(text: str, round: Round) -> int:
    """Parse a decimal string into a scaled integer.

    The sign is applied last, to the fully assembled magnitude.

    Raises:
        FormatError: If $text does not match `(-)?digits?(.digits?)?`.
    """
    match = _DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text)

    sign_part, whole_part, frac_part = match.groups()

    # Whole part is empty for inputs like ".04"
    output = int(whole_part) * SCALE_FACTOR if whole_part else 0

    if frac_part:
        excess_digits = len(frac_part) - SCALE
        if excess_digits <= 0:
            output += int(frac_part) * 10**-excess_digits
        else:
            narrowed = divide(int(frac_part), 10**excess_digits, round)
            logger.debug(f"Rounded {excess_digits} excess fractional digit(s) of '{text}' using {round.name}")
            output += narrowed

    if sign_part == "-":
        output = -output
    return output
