from __future__ import annotations

from enum import Enum


class Round(Enum):
    """Rounding policy used whenever a value loses fractional digits.

    Members:
        HALF_TO_EVEN: Round to nearest; exact halves go to the even neighbour.
            Also known as bankers rounding (alias `BANKERS`).
        HALF_AWAY_FROM_0: Round to nearest; exact halves go away from zero.
        HALF_TOWARDS_0: Round to nearest; exact halves go towards zero.
        TRUNCATE: Drop the excess digits, i.e. always round towards zero
            (alias `TOWARDS_0`).
    """

    # Round to the nearest integer, differing only for exact halves (.5)
    HALF_TO_EVEN = 1
    BANKERS = 1
    HALF_AWAY_FROM_0 = 2
    HALF_TOWARDS_0 = 3

    # Not always the nearest integer
    TRUNCATE = 11
    TOWARDS_0 = 11


DEFAULT_ROUND = Round.HALF_TO_EVEN
