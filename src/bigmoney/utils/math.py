from __future__ import annotations

from bigmoney.domain.monetary.errors import DivisionByZeroError
from bigmoney.domain.monetary.rounding import Round


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide $a by $b, truncating towards zero.

    Python's `divmod` floors. This helper truncates instead, so the remainder
    takes the sign of $a and `a == q * b + r` with `|r| < |b|`.

    Raises:
        DivisionByZeroError: If $b is zero.

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
    """
    # Raise: a zero divisor has no quotient
    if b == 0:
        raise DivisionByZeroError(f"Cannot call `trunc_divmod` because $b is zero ($a = {a})")

    q, r = divmod(abs(a), abs(b))
    if (a < 0) != (b < 0):
        q = -q
    if a < 0:
        r = -r
    return q, r


def divide(a: int, b: int, round: Round) -> int:
    """Divide integer $a by integer $b and round the quotient according to $round.

    All rounding decisions of this package come through here. The quotient is
    computed on absolute values; the sign is applied once at the end, so the
    "towards/away from zero" policies behave the same for negative inputs.

    Args:
        a: Dividend.
        b: Divisor, must not be zero.
        round: Rounding policy for a non-zero remainder.

    Returns:
        The rounded integer quotient.

    Raises:
        DivisionByZeroError: If $b is zero.

    Examples:
        >>> divide(5, 2, Round.HALF_TO_EVEN)
        2
        >>> divide(-5, 2, Round.HALF_AWAY_FROM_0)
        -3
    """
    # Raise: a zero divisor has no quotient
    if b == 0:
        raise DivisionByZeroError(f"Cannot call `divide` because $b is zero ($a = {a})")

    a_abs = abs(a)
    b_abs = abs(b)
    result, rem = divmod(a_abs, b_abs)

    twice_rem = rem * 2
    if twice_rem > b_abs:
        # Past the half: nearest is one up
        if round is not Round.TRUNCATE:
            result += 1
    elif twice_rem == b_abs:
        # Exactly half between two integers
        if round is Round.HALF_TO_EVEN:
            if result % 2 == 1:
                result += 1
        elif round is Round.HALF_AWAY_FROM_0:
            result += 1

    # Either $a XOR $b is negative
    if (a < 0) != (b < 0):
        return -result
    return result
