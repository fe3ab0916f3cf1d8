"""Tests for the checked integers used by the curve math."""

import pytest

from liquidity.safe_int import (
    U64_MAX,
    U128_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint64Overflow,
    Uint128Overflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_invalid_type_raises(self):
        """SafeInt rejects non-integers, including bool."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)


class TestSafeIntArithmetic:
    """Tests for the product and floor division steps."""

    def test_mul(self):
        assert (S(10) * 5).value == 50
        assert (S(10) * S(7)).value == 70

    def test_floordiv(self):
        assert (S(10) // S(3)).value == 3

    def test_floordiv_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(10) // 0

    def test_errors_are_arithmetic_errors(self):
        for cls in (DivisionByZero, Uint64Overflow, Uint128Overflow):
            assert issubclass(cls, SafeIntError)
            assert issubclass(cls, ArithmeticError)


class TestSafeIntBounds:
    """Tests for u64 / u128 bound checks."""

    def test_to_u64(self):
        assert S(U64_MAX).to_u64() == U64_MAX
        assert S(0).to_u64() == 0

    def test_to_u64_overflow(self):
        with pytest.raises(Uint64Overflow):
            S(U64_MAX + 1).to_u64()
        with pytest.raises(Uint64Overflow):
            S(-1).to_u64()

    def test_checked_u128(self):
        wide = (S(U64_MAX) * S(U64_MAX)).checked_u128()
        assert wide.value == U64_MAX * U64_MAX
        with pytest.raises(Uint128Overflow):
            S(U128_MAX + 1).checked_u128()
        with pytest.raises(Uint128Overflow):
            S(-1).checked_u128()
