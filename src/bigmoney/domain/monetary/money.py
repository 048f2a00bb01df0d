from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from bigmoney.domain.monetary.errors import DomainError, FormatError, IncompatibleCurrencyError
from bigmoney.domain.monetary.rounding import DEFAULT_ROUND, Round
from bigmoney.utils.fixed_format import strip_trailing_zeros, to_fixed_string
from bigmoney.utils.math import divide, trunc_divmod
from bigmoney.utils.numeric_tools import AmountLike, BigInt
from bigmoney.utils.scaled_tools import SCALE, SCALE_FACTOR, to_scaled

logger = logging.getLogger(__name__)


class Money:
    """Represents a monetary amount with a currency tag and a rounding policy.

    The amount is stored as a Python `int` scaled by 10**SCALE, so addition and
    subtraction are exact and every lossy step (multiply, divide, pow, formatting,
    allocation) rounds explicitly using the instance's `Round` policy.

    The currency is an opaque string. `add`, `subtract` and comparisons require
    equal currencies; `multiply`, `divide`, `pow` and `allocate` treat the operand
    as a dimensionless factor and always keep the receiver's currency.

    Instances are immutable; every operation returns a new `Money`.
    """

    __slots__ = ("_value", "_currency", "_round")

    def __init__(self, value: AmountLike, currency: str, round: Round = DEFAULT_ROUND):
        """Initialize Money from an amount, currency and rounding policy.

        Args:
            value: Amount as Money, BigInt, safe integer, Decimal or decimal string.
            currency (str): Opaque currency tag, e.g. "USD".
            round (Round): Rounding policy used by every lossy operation.

        Raises:
            FormatError: If $value is a malformed decimal string.
            UnsafeIntegerError: If $value is a machine number outside the safe integer range.
            TypeError: If $currency is not a string or $round is not a `Round`.
        """
        self._check_currency_and_round(currency, round)

        self._currency = currency
        self._round = round
        self._value = to_scaled(value, round)

    @staticmethod
    def _check_currency_and_round(currency: str, round: Round) -> None:
        # Raise: currency must be a string tag
        if not isinstance(currency, str):
            raise TypeError(f"$currency must be a str, but provided value is: {currency!r}")

        # Raise: round must be a Round member
        if not isinstance(round, Round):
            raise TypeError(f"$round must be a Round instance, but provided value is: {round!r}")

    # region Factories

    @classmethod
    def _from_scaled(cls, value: int, currency: str, round: Round) -> Money:
        """Create Money directly from an already scaled integer, skipping parsing."""
        instance = cls.__new__(cls)
        instance._value = value
        instance._currency = currency
        instance._round = round
        return instance

    @classmethod
    def from_source(cls, value: int, currency: str, round: Round = DEFAULT_ROUND) -> Money:
        """Create Money from a raw scaled integer as returned by `to_source`.

        No parsing or range validation is done on $value.

        Args:
            value (int): Scaled integer (human value * 10**SCALE).
            currency (str): Currency tag.
            round (Round): Rounding policy.

        Returns:
            Money: New instance holding exactly $value.
        """
        cls._check_currency_and_round(currency, round)
        return cls._from_scaled(int(value), currency, round)

    @classmethod
    def from_json(cls, pair: Sequence[str], round: Round = DEFAULT_ROUND) -> Money:
        """Create Money from the `[amount, currency]` pair produced by `to_json`.

        Raises:
            FormatError: If $pair is not a two-item sequence or its amount is malformed.
        """
        if isinstance(pair, str) or len(pair) != 2:
            raise FormatError(str(pair))

        amount, currency = pair
        return cls(amount, currency, round)

    @classmethod
    def from_str(cls, value_str: str, round: Round = DEFAULT_ROUND) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.
            round (Round): Rounding policy of the new instance.

        Returns:
            Money: Money object.

        Raises:
            FormatError: If string format is invalid.
        """
        parts = value_str.split()
        if len(parts) != 2:
            raise FormatError(value_str)

        value_part, currency_part = parts
        return cls(value_part, currency_part, round)

    # endregion

    # region Properties

    @property
    def currency(self) -> str:
        """Get the currency tag."""
        return self._currency

    @property
    def round(self) -> Round:
        """Get the rounding policy."""
        return self._round

    def to_source(self) -> int:
        """Return the underlying scaled integer (human value * 10**SCALE)."""
        return self._value

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: AmountLike, operation: str) -> None:
        """Raise IncompatibleCurrencyError if $other is Money in a different currency."""
        if isinstance(other, Money) and other.currency != self.currency:
            raise IncompatibleCurrencyError(operation, self.currency, other.currency)

    def _derive(self, value: int) -> Money:
        return Money._from_scaled(value, self._currency, self._round)

    def add(self, other: AmountLike) -> Money:
        """Return self + $other. Exact.

        Raises:
            IncompatibleCurrencyError: If $other is Money in a different currency.
        """
        self._check_same_currency(other, "add")
        return self._derive(self._value + to_scaled(other, self._round))

    def subtract(self, other: AmountLike) -> Money:
        """Return self - $other. Exact.

        Raises:
            IncompatibleCurrencyError: If $other is Money in a different currency.
        """
        self._check_same_currency(other, "subtract")
        return self._derive(self._value - to_scaled(other, self._round))

    def multiply(self, other: AmountLike) -> Money:
        """Return self * $other, rounded to SCALE digits.

        The currency of $other is not checked; the result keeps this currency.
        """
        # Product of two scaled values carries SCALE_FACTOR twice
        product = to_scaled(other, self._round) * self._value
        return self._derive(divide(product, SCALE_FACTOR, self._round))

    def divide(self, other: AmountLike) -> Money:
        """Return self / $other, rounded to SCALE digits.

        The currency of $other is not checked; the result keeps this currency.

        Raises:
            DivisionByZeroError: If $other is zero.
        """
        # Scale the dividend once more so the quotient stays scaled
        dividend = to_scaled(BigInt(self._value), self._round)
        divisor = to_scaled(other, self._round)
        return self._derive(divide(dividend, divisor, self._round))

    def pow(self, exponent: int) -> Money:
        """Return self raised to the whole-number $exponent.

        Negative exponents give the reciprocal, 1 / self**-exponent.

        Raises:
            DomainError: If $exponent is not an int.
            DivisionByZeroError: If self is zero and $exponent is negative.
        """
        # Raise: only whole exponents are supported
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise DomainError(f"Cannot call `pow` because $exponent ({exponent!r}) is not a whole number")

        if exponent > 1:
            # Each factor carries SCALE_FACTOR once, the result should carry it once
            power = self._value**exponent
            return self._derive(divide(power, SCALE_FACTOR ** (exponent - 1), self._round))
        elif exponent < 0:
            return Money(1, self._currency, self._round).divide(self.pow(-exponent))
        elif exponent == 1:
            return self
        else:
            return Money(1, self._currency, self._round)

    def negate(self) -> Money:
        """Return -self. Exact."""
        return self._derive(-self._value)

    def abs(self) -> Money:
        """Return the absolute value."""
        return self.multiply(self.sign())

    def sign(self) -> int:
        """Return -1 if the value is below zero, 0 if zero and 1 if above zero."""
        return self.compare(0)

    # endregion

    # region Comparison

    def compare(self, other: AmountLike) -> int:
        """Compare this amount with $other.

        Returns:
            int: 0 if equal, -1 if self is lower and 1 if self is higher.

        Raises:
            IncompatibleCurrencyError: If $other is Money in a different currency.
        """
        self._check_same_currency(other, "compare")
        other_value = to_scaled(other, self._round)
        return (self._value > other_value) - (self._value < other_value)

    def is_lesser_than(self, other: AmountLike) -> bool:
        return self.compare(other) == -1

    def is_greater_than(self, other: AmountLike) -> bool:
        return self.compare(other) == 1

    def is_equal(self, other: AmountLike) -> bool:
        return self.compare(other) == 0

    def is_lesser_than_or_equal(self, other: AmountLike) -> bool:
        return self.compare(other) < 1

    def is_greater_than_or_equal(self, other: AmountLike) -> bool:
        return self.compare(other) > -1

    # endregion

    # region Allocation

    def allocate(self, parts: int, precision: int) -> list[Money]:
        """Split this amount into $parts shares with $precision fractional digits.

        No money is lost: the shares sum exactly to this amount rounded to
        $precision (using this instance's policy), and no two shares differ by
        more than one unit of the last digit. Leftover units are handed out
        round-robin starting with the first share, e.g. 1.00 split in 3 gives
        0.34, 0.33, 0.33. Negative amounts are split into negative shares.

        Args:
            parts (int): Number of shares, > 0.
            precision (int): Fractional digits of each share, 0..SCALE.

        Returns:
            list[Money]: $parts shares in this currency and rounding policy.

        Raises:
            DomainError: If $parts or $precision is out of range.
        """
        # Raise: need at least one share
        if isinstance(parts, bool) or not isinstance(parts, int) or parts <= 0:
            raise DomainError(f"Cannot call `allocate` because $parts ({parts!r}) is not a positive integer")

        # Raise: shares cannot be more precise than the internal scale
        if isinstance(precision, bool) or not isinstance(precision, int) or not 0 <= precision <= SCALE:
            raise DomainError(f"Cannot call `allocate` because $precision ({precision!r}) is not an integer between 0 and {SCALE}")

        # Size of one unit of the last requested digit, in scaled terms
        precision_rounder = 10 ** (SCALE - precision)

        units = divide(self._value, precision_rounder, self._round)
        fraction, remainder = trunc_divmod(units, parts)

        shares = [fraction] * parts

        # Spread spare units (or debt, for negative amounts) round-robin
        step = 1 if remainder >= 0 else -1
        for i in range(abs(remainder)):
            shares[i] += step

        logger.debug(f"Allocated {self} into {parts} share(s) at precision {precision}; {abs(remainder)} share(s) got an extra unit")

        return [self._derive(share * precision_rounder) for share in shares]

    # endregion

    # region Formatting

    def to_fixed(self, precision: int) -> str:
        """Return the amount with exactly $precision fractional digits, e.g. Money(1, "USD").to_fixed(2) == "1.00".

        Raises:
            DomainError: If $precision is not a non-negative integer.
        """
        return to_fixed_string(self._value, precision, self._round)

    def format(self) -> str:
        """Return the amount with all insignificant trailing zeros removed, e.g. "1.5" or "2"."""
        return strip_trailing_zeros(self.to_fixed(SCALE))

    def to_json(self) -> list[str]:
        """Return the interchange form `[amount, currency]`, e.g. `["1.5", "USD"]`."""
        return [self.format(), self._currency]

    # endregion

    # region Python protocol

    def __add__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.negate().add(other)

    def __mul__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_amount(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self.abs()

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (same currency and value)."""
        if not isinstance(other, Money):
            return False
        return self._currency == other._currency and self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_lesser_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_lesser_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.is_greater_than_or_equal(other)

    def __hash__(self) -> int:
        """Hash based on scaled value and currency."""
        return hash((self._value, self._currency))

    def __str__(self) -> str:
        """Return string like '1000.5 USD'."""
        return f"{self.format()} {self._currency}"

    def __repr__(self) -> str:
        """Return string like "Money('1000.5', 'USD', Round.HALF_TO_EVEN)"."""
        return f"{self.__class__.__name__}('{self.format()}', '{self._currency}', Round.{self._round.name})"

    # endregion


def _is_amount(value: object) -> bool:
    """Return True if $value is a type `Money` arithmetic accepts as operand."""
    return isinstance(value, (Money, int, float, Decimal, str)) and not isinstance(value, bool)
