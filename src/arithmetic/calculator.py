"""Calculator class grouping the arithmetic operations."""

from arithmetic import operations


class Calculator:
    """
    A stateless calculator.

    Every method is a direct call into :mod:`arithmetic.operations`, so an
    instance can be shared freely between callers and threads.

    Example:
        >>> calc = Calculator()
        >>> calc.divide(10, 2)
        5.0
        >>> calc.power(2, -2)
        0.25
    """

    def add(self, a: float, b: float) -> float:
        """Return a + b."""
        return operations.add(a, b)

    def subtract(self, a: float, b: float) -> float:
        """Return a - b."""
        return operations.subtract(a, b)

    def multiply(self, a: float, b: float) -> float:
        """Return a * b."""
        return operations.multiply(a, b)

    def divide(self, a: float, b: float) -> float:
        """
        Return a / b.

        Raises:
            DivisionByZeroError: If b is zero
        """
        return operations.divide(a, b)

    def sqrt(self, number: float) -> float:
        """
        Return the square root of number.

        Raises:
            InvalidArgumentError: If number is negative
        """
        return operations.sqrt(number)

    def power(self, base: float, exponent: int) -> float:
        """Raise base to an integer exponent."""
        return operations.power(base, exponent)

    def __repr__(self) -> str:
        return "Calculator()"
