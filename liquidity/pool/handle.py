"""Typed handle binding a pool's configuration to its derived accounts."""

from __future__ import annotations

from dataclasses import dataclass

from liquidity.constants import DEFAULT_PROGRAM_ID, SHARE_DECIMALS
from liquidity.derivation import PoolAuthority, derive_pool_addresses
from liquidity.ledger.base import Ledger
from liquidity.models.config import PoolConfig, PoolState


@dataclass(frozen=True)
class PoolHandle:
    """Everything a workflow needs to address one pool.

    The vaults are the token accounts of mint_x and mint_y owned by the
    config address; the share mint's authority is the config address too.
    """

    config: PoolConfig
    config_address: str
    share_mint: str
    program_id: str = DEFAULT_PROGRAM_ID
    share_decimals: int = SHARE_DECIMALS

    @classmethod
    def from_config(
        cls,
        config: PoolConfig,
        program_id: str = DEFAULT_PROGRAM_ID,
        share_decimals: int = SHARE_DECIMALS,
    ) -> PoolHandle:
        """Rebuild a handle from a stored config by re-deriving its addresses.

        Raises:
            ValueError: If the stored bumps do not match the derivation
        """
        addresses = derive_pool_addresses(config.seed, program_id)
        if (addresses.config_bump, addresses.share_bump) != (config.config_bump, config.share_bump):
            raise ValueError(
                f"Stored bumps ({config.config_bump}, {config.share_bump}) do not match "
                f"derived ({addresses.config_bump}, {addresses.share_bump}) for seed {config.seed}"
            )
        return cls(
            config=config,
            config_address=addresses.config,
            share_mint=addresses.share_mint,
            program_id=program_id,
            share_decimals=share_decimals,
        )

    @property
    def seed(self) -> int:
        return self.config.seed

    @property
    def authority(self) -> PoolAuthority:
        """Capability the pool signs vault transfers and share mints with."""
        return PoolAuthority.for_pool(self.config.seed, self.config.config_bump, self.program_id)

    def with_config(self, config: PoolConfig) -> PoolHandle:
        return PoolHandle(
            config=config,
            config_address=self.config_address,
            share_mint=self.share_mint,
            program_id=self.program_id,
            share_decimals=self.share_decimals,
        )

    def state(self, ledger: Ledger) -> PoolState:
        """Read reserves and share supply from the ledger."""
        return PoolState(
            reserve_x=ledger.balance(self.config_address, self.config.mint_x),
            reserve_y=ledger.balance(self.config_address, self.config.mint_y),
            share_supply=ledger.supply(self.share_mint),
        )
