"""
Arithmetic utility library.

Provides:
- A stateless Calculator over the basic operations
- Pure functions for add, subtract, multiply, divide, sqrt and integer power
- Numeric helpers for rounding, parity and factorial
"""

from arithmetic.calculator import Calculator
from arithmetic.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidArgumentError,
    OutOfRangeError,
)
from arithmetic.operations import (
    add,
    divide,
    multiply,
    power,
    sqrt,
    subtract,
)
from arithmetic.utils import factorial, format_number, is_even
from arithmetic.validators import (
    validate_integer,
    validate_non_negative,
    validate_range,
)

__all__ = [
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "add",
    "divide",
    "factorial",
    "format_number",
    "is_even",
    "multiply",
    "power",
    "sqrt",
    "subtract",
    "validate_integer",
    "validate_non_negative",
    "validate_range",
]

__version__ = "0.1.0"
