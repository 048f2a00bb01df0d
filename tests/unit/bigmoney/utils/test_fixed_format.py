import pytest

from bigmoney.domain.monetary.errors import DomainError
from bigmoney.domain.monetary.rounding import Round
from bigmoney.utils.fixed_format import strip_trailing_zeros, to_fixed_string

# Constants
P = 20


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (1, 0, "0"),
        (1 * 10**P, 0, "1"),
        (1 * 10 ** (P - 1), 0, "0"),
        (1 * 10 ** (P - 1), 1, "0.1"),
        (1 * 10 ** (P - 2), 2, "0.01"),
        (4 * 10 ** (P - 3), 2, "0.00"),
        (5 * 10 ** (P - 3), 2, "0.00"),
        (6 * 10 ** (P - 3), 2, "0.01"),
        (99 * 10 ** (P - 2), 2, "0.99"),
        (995 * 10 ** (P - 3), 2, "1.00"),
        (-1, 0, "0"),
        (-1 * 10**P, 0, "-1"),
        (-1 * 10 ** (P - 1), 0, "0"),
        (-1 * 10 ** (P - 1), 1, "-0.1"),
        (-1 * 10 ** (P - 2), 2, "-0.01"),
        (-4 * 10 ** (P - 3), 2, "-0.00"),
        (-5 * 10 ** (P - 3), 2, "-0.00"),
        (-6 * 10 ** (P - 3), 2, "-0.01"),
        (-99 * 10 ** (P - 2), 2, "-0.99"),
        (-995 * 10 ** (P - 3), 2, "-1.00"),
    ],
)
def test_to_fixed_string_bankers(value, precision, expected):
    assert to_fixed_string(value, precision, Round.BANKERS) == expected


def test_to_fixed_string_carry_into_larger_whole_part():
    assert to_fixed_string(12999 * 10 ** (P - 3), 2, Round.HALF_TO_EVEN) == "13.00"
    assert to_fixed_string(-12999 * 10 ** (P - 3), 2, Round.HALF_TO_EVEN) == "-13.00"
    assert to_fixed_string(12999 * 10 ** (P - 3), 2, Round.TRUNCATE) == "12.99"


@pytest.mark.parametrize(
    "round, positive, negative",
    [
        (Round.HALF_TO_EVEN, "0.12", "-0.12"),
        (Round.HALF_AWAY_FROM_0, "0.13", "-0.13"),
        (Round.HALF_TOWARDS_0, "0.12", "-0.12"),
        (Round.TRUNCATE, "0.12", "-0.12"),
    ],
)
def test_to_fixed_string_half_cases_per_policy(round, positive, negative):
    value = 125 * 10 ** (P - 3)
    assert to_fixed_string(value, 2, round) == positive
    assert to_fixed_string(-value, 2, round) == negative


def test_to_fixed_string_precision_equal_to_scale():
    assert to_fixed_string(1, P, Round.HALF_TO_EVEN) == "0." + "0" * 19 + "1"
    assert to_fixed_string(-(10**P) - 1, P, Round.HALF_TO_EVEN) == "-1." + "0" * 19 + "1"


def test_to_fixed_string_precision_above_scale_pads_with_zeros():
    assert to_fixed_string(10**P + 1, P + 2, Round.HALF_TO_EVEN) == "1." + "0" * 19 + "100"
    assert to_fixed_string(-5 * 10 ** (P - 1), P + 5, Round.TRUNCATE) == "-0.5" + "0" * 24


def test_to_fixed_string_large_whole_part():
    value = 123456789012345678901234567890 * 10**P + 5 * 10 ** (P - 1)
    assert to_fixed_string(value, 1, Round.HALF_TO_EVEN) == "123456789012345678901234567890.5"
    assert to_fixed_string(value, 0, Round.HALF_TO_EVEN) == "123456789012345678901234567890"
    assert to_fixed_string(value, 0, Round.HALF_AWAY_FROM_0) == "123456789012345678901234567891"


@pytest.mark.parametrize("precision", [-1, 1.5, "2", True])
def test_to_fixed_string_rejects_bad_precision(precision):
    with pytest.raises(DomainError):
        to_fixed_string(1, precision, Round.HALF_TO_EVEN)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.50", "1.5"),
        ("2.00", "2"),
        ("0.000", "0"),
        ("-0.10", "-0.1"),
        ("10.0", "10"),
        ("100", "100"),
        ("-0.00", "-0"),
    ],
)
def test_strip_trailing_zeros(text, expected):
    assert strip_trailing_zeros(text) == expected
