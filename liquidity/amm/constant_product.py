"""Constant-product curve math for share issuance and redemption.

A pool holds reserves (reserve_x, reserve_y) backing share_supply shares.
Issuing or burning n shares moves a proportional slice of both reserves:

    x = floor(n * reserve_x / share_supply)
    y = floor(n * reserve_y / share_supply)

Both legs are floored, so the pool never hands out more than the
proportional amount and never charges a depositor less than it. The first
deposit into an empty pool (bootstrap) takes the caller's bounds verbatim
and sets the initial price ratio.

All inputs are u64 ledger amounts; the products are carried in a u128
intermediate.
"""

from __future__ import annotations

from fractions import Fraction

from liquidity.amm.base import CurveAmounts
from liquidity.constants import MAX_PRECISION
from liquidity.errors import CurveArithmeticError, InsufficientSupplyError, InvalidAmount
from liquidity.safe_int import S, SafeIntError


def is_bootstrap(reserve_x: int, reserve_y: int, share_supply: int) -> bool:
    """True when the pool holds nothing and has issued no shares."""
    return share_supply == 0 and reserve_x == 0 and reserve_y == 0


def deposit_amounts(
    reserve_x: int,
    reserve_y: int,
    share_supply: int,
    requested_shares: int,
    precision: int,
    *,
    max_x: int | None = None,
    max_y: int | None = None,
) -> CurveAmounts:
    """Calculate the asset amounts required to issue requested_shares.

    Args:
        reserve_x: Current pool reserve of asset X
        reserve_y: Current pool reserve of asset Y
        share_supply: Shares currently issued
        requested_shares: Shares the depositor wants minted
        precision: Decimal places of the share mint
        max_x: Depositor's upper bound for asset X (used verbatim on bootstrap)
        max_y: Depositor's upper bound for asset Y (used verbatim on bootstrap)

    Returns:
        CurveAmounts with the floored proportional amounts, or (max_x, max_y)
        for a bootstrap deposit

    Raises:
        InvalidAmount: If the pool is empty and no bounds were supplied
        CurveArithmeticError: On u128/u64 overflow, or a zero supply while
            reserves are non-zero
    """
    _check_inputs(reserve_x, reserve_y, share_supply, requested_shares, precision)

    if is_bootstrap(reserve_x, reserve_y, share_supply):
        if max_x is None or max_y is None:
            raise InvalidAmount("Bootstrap deposit requires max_x and max_y")
        _check_u64("max_x", max_x)
        _check_u64("max_y", max_y)
        return CurveAmounts(x=max_x, y=max_y)

    if share_supply == 0:
        # Reserves without shares: nothing to price against
        raise CurveArithmeticError(
            f"Zero share supply with non-empty reserves ({reserve_x}, {reserve_y})"
        )

    return _proportional(reserve_x, reserve_y, share_supply, requested_shares)


def withdraw_amounts(
    reserve_x: int,
    reserve_y: int,
    share_supply: int,
    shares_to_burn: int,
    precision: int,
) -> CurveAmounts:
    """Calculate the asset amounts paid out for burning shares_to_burn.

    Args:
        reserve_x: Current pool reserve of asset X
        reserve_y: Current pool reserve of asset Y
        share_supply: Shares currently issued
        shares_to_burn: Shares the withdrawer redeems
        precision: Decimal places of the share mint

    Returns:
        CurveAmounts with the floored proportional amounts

    Raises:
        InsufficientSupplyError: If share_supply is zero or smaller than
            shares_to_burn
        CurveArithmeticError: On u128/u64 overflow
    """
    _check_inputs(reserve_x, reserve_y, share_supply, shares_to_burn, precision)

    if share_supply == 0:
        raise InsufficientSupplyError("Cannot withdraw from a pool with zero share supply")
    if shares_to_burn > share_supply:
        raise InsufficientSupplyError(
            f"Cannot burn {shares_to_burn} shares, supply is {share_supply}"
        )

    return _proportional(reserve_x, reserve_y, share_supply, shares_to_burn)


def spot_ratio(reserve_x: int, reserve_y: int) -> Fraction | None:
    """Exact price ratio reserve_x / reserve_y, or None if either side is empty."""
    if reserve_x <= 0 or reserve_y <= 0:
        return None
    return Fraction(reserve_x, reserve_y)


def _proportional(
    reserve_x: int, reserve_y: int, share_supply: int, shares: int
) -> CurveAmounts:
    try:
        x = (S(shares) * S(reserve_x)).checked_u128() // S(share_supply)
        y = (S(shares) * S(reserve_y)).checked_u128() // S(share_supply)
        return CurveAmounts(x=x.to_u64(), y=y.to_u64())
    except SafeIntError as err:
        raise CurveArithmeticError(str(err)) from err


def _check_inputs(
    reserve_x: int, reserve_y: int, share_supply: int, shares: int, precision: int
) -> None:
    _check_u64("reserve_x", reserve_x)
    _check_u64("reserve_y", reserve_y)
    _check_u64("share_supply", share_supply)
    _check_u64("shares", shares)
    if not 0 <= precision <= MAX_PRECISION:
        raise CurveArithmeticError(f"precision must be in [0, {MAX_PRECISION}]: {precision}")


def _check_u64(name: str, value: int) -> None:
    try:
        S(value).to_u64()
    except SafeIntError as err:
        raise CurveArithmeticError(f"{name}: {err}") from err


__all__ = [
    "deposit_amounts",
    "withdraw_amounts",
    "is_bootstrap",
    "spot_ratio",
]
