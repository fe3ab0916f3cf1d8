"""Pydantic models for pool records."""

from liquidity.models.config import PoolConfig, PoolState
from liquidity.models.types import U8, U16, U64, Address, normalize_address

__all__ = [
    "PoolConfig",
    "PoolState",
    "Address",
    "U8",
    "U16",
    "U64",
    "normalize_address",
]
