"""Withdraw workflow: redeem shares for a proportional slice of both assets."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from liquidity.amm.constant_product import withdraw_amounts
from liquidity.errors import InvalidAmount, PoolError, PoolLocked, SlippageExceeded
from liquidity.ledger.base import Ledger, Signer
from liquidity.models.config import PoolState
from liquidity.pool.handle import PoolHandle

logger = structlog.get_logger()


@dataclass(frozen=True)
class WithdrawResult:
    """Outcome of a successful withdraw."""

    x: int
    y: int
    shares: int
    state: PoolState


def withdraw(
    handle: PoolHandle,
    ledger: Ledger,
    withdrawer: Signer,
    shares_to_burn: int,
    min_x: int,
    min_y: int,
) -> WithdrawResult:
    """Burn shares_to_burn from withdrawer and pay out both pooled assets.

    At least one of min_x / min_y must be non-zero. A single zero bound is
    accepted, so one leg may pay out nothing.

    Raises:
        PoolLocked: If the pool is locked
        InvalidAmount: If shares_to_burn is zero, both minimums are zero,
            or an amount is negative
        InsufficientSupplyError: If the pool has no (or too few) shares
        SlippageExceeded: If the curve pays less than min_x or min_y
        CurveArithmeticError: On overflow in the curve math
        LedgerError: If a transfer or the burn fails
    """
    config = handle.config
    try:
        if config.locked:
            raise PoolLocked(f"Pool {config.seed} is locked")
        if shares_to_burn == 0:
            raise InvalidAmount("Withdraw must burn a non-zero share amount")
        if min_x == 0 and min_y == 0:
            raise InvalidAmount("At least one of min_x, min_y must be non-zero")
        if shares_to_burn < 0 or min_x < 0 or min_y < 0:
            raise InvalidAmount(
                f"Amounts cannot be negative: shares={shares_to_burn}, "
                f"min_x={min_x}, min_y={min_y}"
            )

        before = handle.state(ledger)
        amounts = withdraw_amounts(
            before.reserve_x,
            before.reserve_y,
            before.share_supply,
            shares_to_burn,
            handle.share_decimals,
        )

        if amounts.x < min_x or amounts.y < min_y:
            raise SlippageExceeded(
                f"Withdraw pays ({amounts.x}, {amounts.y}), minimums are ({min_x}, {min_y})"
            )
    except PoolError as err:
        logger.warning(
            "withdraw_rejected",
            seed=config.seed,
            withdrawer=withdrawer.address[-8:],
            shares_to_burn=shares_to_burn,
            error=type(err).__name__,
            detail=str(err),
        )
        raise

    authority = handle.authority
    ledger.transfer(config.mint_x, handle.config_address, withdrawer.address, amounts.x, authority)
    ledger.transfer(config.mint_y, handle.config_address, withdrawer.address, amounts.y, authority)
    ledger.burn(handle.share_mint, withdrawer.address, shares_to_burn, withdrawer)

    after = handle.state(ledger)
    logger.info(
        "withdraw_applied",
        seed=config.seed,
        withdrawer=withdrawer.address[-8:],
        x=amounts.x,
        y=amounts.y,
        shares=shares_to_burn,
        share_supply=after.share_supply,
    )
    return WithdrawResult(x=amounts.x, y=amounts.y, shares=shares_to_burn, state=after)
