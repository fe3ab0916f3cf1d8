"""Pool initialization.

Creates the configuration record, the share mint and the two empty vaults
of a new pool. Pure record construction: no curve math runs here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from liquidity.derivation import derive_pool_addresses
from liquidity.errors import InvalidPoolAssets, PoolAlreadyExists
from liquidity.ledger.base import Ledger, Signer
from liquidity.models.config import PoolConfig
from liquidity.models.types import normalize_address
from liquidity.pool.handle import PoolHandle
from liquidity.settings import DEFAULT_POOL_SETTINGS, PoolSettings

if TYPE_CHECKING:
    from liquidity.pools.registry import PoolRegistry

logger = structlog.get_logger()


def initialize(
    ledger: Ledger,
    registry: PoolRegistry,
    initializer: Signer,
    seed: int,
    mint_x: str,
    mint_y: str,
    fee: int,
    authority: str | None = None,
    settings: PoolSettings = DEFAULT_POOL_SETTINGS,
) -> PoolHandle:
    """Create a new, unlocked, empty pool.

    Args:
        ledger: Ledger holding the pooled assets' mints
        registry: Persistence for pool configs (detects duplicate seeds)
        initializer: Verified caller creating the pool
        seed: u64 disambiguating pools for the same pair
        mint_x: Identifier of asset X
        mint_y: Identifier of asset Y
        fee: u16 fee parameter, stored only
        authority: Optional owner recorded on the config
        settings: Program id and share decimals

    Returns:
        PoolHandle for the new pool

    Raises:
        InvalidPoolAssets: If mint_x and mint_y are the same asset
        PoolAlreadyExists: If a pool with this seed is already registered
        pydantic.ValidationError: If seed, fee or an address is out of range
        LedgerError: If a mint is unknown or a pool account already exists
    """
    mint_x = normalize_address(mint_x)
    mint_y = normalize_address(mint_y)
    if mint_x == mint_y:
        raise InvalidPoolAssets(f"Pool assets must differ: {mint_x}")
    if seed in registry:
        raise PoolAlreadyExists(f"Pool with seed {seed} already exists")

    addresses = derive_pool_addresses(seed, settings.program_id)
    config = PoolConfig(
        seed=seed,
        authority=normalize_address(authority) if authority is not None else None,
        mint_x=mint_x,
        mint_y=mint_y,
        fee=fee,
        locked=False,
        config_bump=addresses.config_bump,
        share_bump=addresses.share_bump,
    )
    handle = PoolHandle(
        config=config,
        config_address=addresses.config,
        share_mint=addresses.share_mint,
        program_id=settings.program_id,
        share_decimals=settings.share_decimals,
    )

    with ledger.atomic():
        ledger.supply(mint_x)
        ledger.supply(mint_y)
        ledger.create_mint(handle.share_mint, settings.share_decimals, handle.config_address)
        ledger.create_account(handle.config_address, mint_x)
        ledger.create_account(handle.config_address, mint_y)
        registry.register(config)

    logger.info(
        "pool_initialized",
        seed=seed,
        initializer=initializer.address[-8:],
        config=handle.config_address[-8:],
        share_mint=handle.share_mint[-8:],
        fee=fee,
    )
    return handle
