"""Checked integers for the curve's wide intermediates.

Share math multiplies two u64 quantities into a u128 product and floors it
back down by the share supply. SafeInt carries the value through those steps
and raises an ArithmeticError subclass instead of letting a bad result reach
the ledger:

    wide = (S(shares) * S(reserve)).checked_u128()
    amount = (wide // S(supply)).to_u64()
"""

from __future__ import annotations

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class SafeIntError(ArithmeticError):
    """Base class for checked integer errors."""


class DivisionByZero(SafeIntError):
    """Floor division by a zero share supply."""


class Uint64Overflow(SafeIntError):
    """Result does not fit a u64 token amount."""


class Uint128Overflow(SafeIntError):
    """Intermediate product does not fit u128."""


class SafeInt:
    """Non-bool integer with checked floor division and width conversions."""

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            value = value._value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * SafeInt(other)._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division.

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = SafeInt(other)._value
        if divisor == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // divisor)

    def checked_u128(self) -> SafeInt:
        """Return self if it fits u128.

        Raises:
            Uint128Overflow: If the value is negative or above 2^128-1
        """
        if not 0 <= self._value <= U128_MAX:
            raise Uint128Overflow(f"Value exceeds u128 range: {self._value}")
        return self

    def to_u64(self) -> int:
        """Unwrap as a u64 amount.

        Raises:
            Uint64Overflow: If the value is negative or above 2^64-1
        """
        if not 0 <= self._value <= U64_MAX:
            raise Uint64Overflow(f"Value outside u64 range: {self._value}")
        return self._value


S = SafeInt
