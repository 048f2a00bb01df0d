__version__ = "0.1.0"

from bigmoney.domain.monetary.errors import (
    DivisionByZeroError,
    DomainError,
    FormatError,
    IncompatibleCurrencyError,
    MoneyError,
    UnsafeIntegerError,
)
from bigmoney.domain.monetary.money import Money
from bigmoney.domain.monetary.rounding import Round
from bigmoney.utils.numeric_tools import BigInt
from bigmoney.utils.scaled_tools import SCALE

__all__ = [
    "BigInt",
    "DivisionByZeroError",
    "DomainError",
    "FormatError",
    "IncompatibleCurrencyError",
    "Money",
    "MoneyError",
    "Round",
    "SCALE",
    "UnsafeIntegerError",
]
