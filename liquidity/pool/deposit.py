"""Deposit workflow: issue shares against a proportional slice of both assets."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from liquidity.amm.constant_product import deposit_amounts, is_bootstrap
from liquidity.errors import InvalidAmount, PoolError, PoolLocked, SlippageExceeded
from liquidity.ledger.base import Ledger, Signer
from liquidity.models.config import PoolState
from liquidity.pool.handle import PoolHandle

logger = structlog.get_logger()


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a successful deposit."""

    x: int
    y: int
    shares: int
    bootstrap: bool
    state: PoolState


def deposit(
    handle: PoolHandle,
    ledger: Ledger,
    depositor: Signer,
    requested_shares: int,
    max_x: int,
    max_y: int,
) -> DepositResult:
    """Mint requested_shares to depositor in exchange for both pooled assets.

    On an empty pool max_x and max_y are taken verbatim and set the
    initial price ratio. All checks run before the first ledger call; the
    caller provides atomicity of the three ledger effects.

    Raises:
        PoolLocked: If the pool is locked
        InvalidAmount: If requested_shares is zero, a bound is negative, or
            both bounds are zero on the first deposit
        SlippageExceeded: If the curve asks for more than max_x or max_y
        CurveArithmeticError: On overflow in the curve math
        LedgerError: If a transfer or the mint fails
    """
    config = handle.config
    try:
        if config.locked:
            raise PoolLocked(f"Pool {config.seed} is locked")
        if requested_shares == 0:
            raise InvalidAmount("Deposit must request a non-zero share amount")
        if requested_shares < 0 or max_x < 0 or max_y < 0:
            raise InvalidAmount(
                f"Amounts cannot be negative: shares={requested_shares}, "
                f"max_x={max_x}, max_y={max_y}"
            )

        before = handle.state(ledger)
        bootstrap = is_bootstrap(before.reserve_x, before.reserve_y, before.share_supply)
        if bootstrap and max_x == 0 and max_y == 0:
            raise InvalidAmount("First deposit must fund at least one of max_x, max_y")
        amounts = deposit_amounts(
            before.reserve_x,
            before.reserve_y,
            before.share_supply,
            requested_shares,
            handle.share_decimals,
            max_x=max_x,
            max_y=max_y,
        )

        if amounts.x > max_x or amounts.y > max_y:
            raise SlippageExceeded(
                f"Deposit needs ({amounts.x}, {amounts.y}), limits are ({max_x}, {max_y})"
            )
    except PoolError as err:
        logger.warning(
            "deposit_rejected",
            seed=config.seed,
            depositor=depositor.address[-8:],
            requested_shares=requested_shares,
            error=type(err).__name__,
            detail=str(err),
        )
        raise

    ledger.transfer(config.mint_x, depositor.address, handle.config_address, amounts.x, depositor)
    ledger.transfer(config.mint_y, depositor.address, handle.config_address, amounts.y, depositor)
    ledger.mint(handle.share_mint, depositor.address, requested_shares, handle.authority)

    after = handle.state(ledger)
    logger.info(
        "deposit_applied",
        seed=config.seed,
        depositor=depositor.address[-8:],
        x=amounts.x,
        y=amounts.y,
        shares=requested_shares,
        bootstrap=bootstrap,
        share_supply=after.share_supply,
    )
    return DepositResult(
        x=amounts.x,
        y=amounts.y,
        shares=requested_shares,
        bootstrap=bootstrap,
        state=after,
    )
