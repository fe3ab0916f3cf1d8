"""Constant-product two-asset liquidity pools."""

from liquidity.errors import (
    CurveArithmeticError,
    InsufficientSupplyError,
    InvalidAmount,
    InvalidPoolAssets,
    PoolAlreadyExists,
    PoolError,
    PoolLocked,
    PoolNotFound,
    SlippageExceeded,
)
from liquidity.service import PoolService

__version__ = "0.1.0"
__all__ = [
    "PoolService",
    "PoolError",
    "PoolLocked",
    "InvalidAmount",
    "SlippageExceeded",
    "InsufficientSupplyError",
    "CurveArithmeticError",
    "InvalidPoolAssets",
    "PoolAlreadyExists",
    "PoolNotFound",
    "__version__",
]
