import logging
from functools import reduce

import pytest

from bigmoney.domain.monetary.errors import DomainError
from bigmoney.domain.monetary.money import Money
from bigmoney.domain.monetary.rounding import Round
from bigmoney.utils.scaled_tools import SCALE


def fixed(shares: list[Money], precision: int) -> list[str]:
    return [share.to_fixed(precision) for share in shares]


def total(shares: list[Money]) -> Money:
    return reduce(lambda acc, share: acc.add(share), shares)


@pytest.mark.parametrize(
    "amount, parts, precision, expected",
    [
        ("1.00", 3, 2, ["0.34", "0.33", "0.33"]),
        ("-1.00", 3, 2, ["-0.34", "-0.33", "-0.33"]),
        ("100", 3, 0, ["34", "33", "33"]),
        ("0.05", 3, 2, ["0.02", "0.02", "0.01"]),
        ("0.01", 3, 2, ["0.01", "0.00", "0.00"]),
        ("10", 4, 2, ["2.50", "2.50", "2.50", "2.50"]),
        ("7.5", 1, 1, ["7.5"]),
    ],
)
def test_allocate(amount, parts, precision, expected):
    shares = Money(amount, "USD").allocate(parts, precision)
    assert fixed(shares, precision) == expected
    assert total(shares).is_equal(amount)


def test_allocate_keeps_currency_and_policy():
    shares = Money("1.00", "EUR", Round.HALF_AWAY_FROM_0).allocate(3, 2)
    assert {share.currency for share in shares} == {"EUR"}
    assert {share.round for share in shares} == {Round.HALF_AWAY_FROM_0}


def test_allocate_at_full_scale():
    shares = Money.from_source(1, "USD").allocate(3, SCALE)
    assert [share.to_source() for share in shares] == [1, 0, 0]


def test_allocate_rounds_source_to_precision_with_policy():
    even = Money("1.005", "USD", Round.HALF_TO_EVEN).allocate(2, 2)
    assert fixed(even, 2) == ["0.50", "0.50"]

    away = Money("1.005", "USD", Round.HALF_AWAY_FROM_0).allocate(2, 2)
    assert fixed(away, 2) == ["0.51", "0.50"]


@pytest.mark.parametrize("amount", ["1.00", "-1.00", "10", "0.07", "123.456", "-0.999", "1000000.01", "0"])
@pytest.mark.parametrize("parts", [1, 2, 3, 7, 11])
@pytest.mark.parametrize("precision", [0, 2, 4])
def test_allocate_conserves_amount_at_precision(amount, parts, precision):
    money = Money(amount, "USD")
    shares = money.allocate(parts, precision)

    assert len(shares) == parts
    assert total(shares).is_equal(money.to_fixed(precision))

    # No two shares differ by more than one unit of the last digit
    sources = [share.to_source() for share in shares]
    assert max(sources) - min(sources) <= 10 ** (SCALE - precision)

    # Extra units go to the first shares
    magnitudes = [abs(source) for source in sources]
    assert magnitudes == sorted(magnitudes, reverse=True)


def test_allocate_logs_split(caplog):
    with caplog.at_level(logging.DEBUG, logger="bigmoney.domain.monetary.money"):
        Money("1.00", "USD").allocate(3, 2)
    assert "into 3 share(s) at precision 2" in caplog.text


@pytest.mark.parametrize("parts", [0, -1, 1.5, True, "3"])
def test_allocate_rejects_bad_parts(parts):
    with pytest.raises(DomainError):
        Money(1, "USD").allocate(parts, 2)


@pytest.mark.parametrize("precision", [-1, SCALE + 1, 2.0, False])
def test_allocate_rejects_bad_precision(precision):
    with pytest.raises(DomainError):
        Money(1, "USD").allocate(3, precision)
