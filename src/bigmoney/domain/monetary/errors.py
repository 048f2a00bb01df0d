"""Exceptions raised by monetary arithmetic.

Every error is an input-contract violation raised synchronously at the point
where it is detected. None of them is transient, so callers fix the input
instead of retrying. Each class also derives from the closest builtin, so
`except ValueError` style handlers keep working.
"""


class MoneyError(Exception):
    """Base class for all errors raised by this package."""


class FormatError(MoneyError, ValueError):
    """Raised when a string is not a decimal number like `-12.34`, `.5` or `7`."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse $text ('{text}') because it must follow the pattern (-)##.## or (-)##")


class UnsafeIntegerError(MoneyError, OverflowError):
    """Raised when a machine number is not a whole number within the exactly representable range."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Cannot use $value ({value}) because it is not a safe integer; pass it as a string or `BigInt` instead")


class IncompatibleCurrencyError(MoneyError, ValueError):
    """Raised when adding, subtracting or comparing amounts in different currencies."""

    def __init__(self, operation: str, left: str, right: str):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"Cannot call `{operation}` on different currencies: '{left}' and '{right}'. Convert first")


class DomainError(MoneyError, ValueError):
    """Raised when an argument lies outside the domain an operation is defined on."""


class DivisionByZeroError(DomainError, ZeroDivisionError):
    """Raised when a divisor is zero."""
