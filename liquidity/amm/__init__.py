"""Curve engine for share issuance and redemption."""

from liquidity.amm.base import CurveAmounts
from liquidity.amm.constant_product import (
    deposit_amounts,
    is_bootstrap,
    spot_ratio,
    withdraw_amounts,
)

__all__ = [
    "CurveAmounts",
    "deposit_amounts",
    "withdraw_amounts",
    "is_bootstrap",
    "spot_ratio",
]
