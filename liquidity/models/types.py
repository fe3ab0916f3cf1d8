"""Shared type definitions for pool models.

Integer widths mirror the ledger: token amounts and seeds are u64, the fee
is u16 and derivation bumps are u8.
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from liquidity.constants import U8_MAX, U16_MAX, U64_MAX


def _bounded_uint(bits: int, maximum: int) -> Callable[[Any], int]:
    def validate(value: Any) -> int:
        """Validate an unsigned integer of the given width.

        Raises:
            ValueError: If value is not a non-negative integer within range
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"u{bits} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"u{bits} cannot be negative: {value}")
        if value > maximum:
            raise ValueError(f"u{bits} overflow: {value} > 2^{bits}-1")
        return value

    return validate


validate_u8 = _bounded_uint(8, U8_MAX)
validate_u16 = _bounded_uint(16, U16_MAX)
validate_u64 = _bounded_uint(64, U64_MAX)

U8 = Annotated[int, BeforeValidator(validate_u8)]
U16 = Annotated[int, BeforeValidator(validate_u16)]
U64 = Annotated[int, BeforeValidator(validate_u64)]

# 32-byte account address as lowercase hex
Address = Annotated[str, Field(pattern=r"^0x[a-f0-9]{64}$")]


def normalize_address(address: str) -> str:
    """Normalize an address to lowercase with 0x prefix."""
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr
