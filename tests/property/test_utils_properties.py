"""Property-based tests for the numeric helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arithmetic import InvalidArgumentError, factorial, format_number, is_even


@pytest.mark.property
class TestFormatNumberProperties:
    """Property-based tests for format_number."""

    @given(
        num=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
        decimals=st.integers(min_value=0, max_value=10),
    )
    def test_matches_builtin_round(self, num: float, decimals: int):
        """format_number agrees with round()"""
        assert format_number(num, decimals) == round(num, decimals)

    @given(
        num=st.floats(min_value=-1e3, max_value=1e3, allow_nan=False),
        decimals=st.integers(min_value=0, max_value=6),
    )
    def test_idempotent(self, num: float, decimals: int):
        """Rounding an already rounded value changes nothing"""
        once = format_number(num, decimals)
        assert format_number(once, decimals) == once


@pytest.mark.property
class TestIsEvenProperties:
    """Property-based tests for is_even."""

    @given(n=st.integers())
    def test_alternates(self, n: int):
        """Exactly one of n and n + 1 is even"""
        assert is_even(n) != is_even(n + 1)

    @given(n=st.integers())
    def test_doubles_are_even(self, n: int):
        assert is_even(2 * n)

    @given(n=st.integers())
    def test_sign_does_not_matter(self, n: int):
        assert is_even(n) == is_even(-n)


@pytest.mark.property
class TestFactorialProperties:
    """Property-based tests for factorial."""

    @given(n=st.integers(min_value=1, max_value=200))
    def test_recurrence(self, n: int):
        """factorial(n) == n * factorial(n - 1)"""
        assert factorial(n) == n * factorial(n - 1)

    @given(n=st.integers(max_value=-1))
    def test_negative_raises(self, n: int):
        with pytest.raises(InvalidArgumentError, match="^Factorial of negative number$"):
            factorial(n)
