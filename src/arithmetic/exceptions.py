"""Custom exceptions for the arithmetic package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all arithmetic errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidArgumentError(CalculatorError):
    """Raised when an input falls outside an operation's domain."""

    def __init__(self, value: Any, reason: str = "Invalid argument") -> None:
        super().__init__(reason, value)
        self.reason = reason


class OutOfRangeError(InvalidArgumentError):
    """Raised when a value is outside acceptable range."""

    def __init__(
        self, value: float, min_val: float | None = None, max_val: float | None = None
    ) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(value, f"Value out of range {range_str}")
        self.min_val = min_val
        self.max_val = max_val
