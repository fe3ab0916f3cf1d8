"""Entry point wiring the pool workflows to a ledger and a registry.

PoolService is what a hosting process talks to: it looks pools up by seed
and runs each deposit or withdraw through PoolRegistry.execute, which
serializes operations per pool and commits ledger effects atomically.
"""

from __future__ import annotations

from liquidity.ledger.base import Ledger, Signer
from liquidity.log_config import configure_logging
from liquidity.pool.deposit import DepositResult, deposit
from liquidity.pool.handle import PoolHandle
from liquidity.pool.initialize import initialize
from liquidity.pool.withdraw import WithdrawResult, withdraw
from liquidity.pools.registry import PoolRegistry
from liquidity.settings import PoolSettings


class PoolService:
    """Runs pool workflows against one ledger.

    Args:
        ledger: Ledger holding all pool reserves and share mints
        registry: Pool config store. If None, a fresh registry is created.
    """

    def __init__(self, ledger: Ledger, registry: PoolRegistry | None = None) -> None:
        self.ledger = ledger
        self.registry = registry if registry is not None else PoolRegistry()

    @classmethod
    def from_env(cls, ledger: Ledger) -> PoolService:
        """Build a service from LIQUIDITY_* environment variables.

        Configures structlog at the settings' log level, then creates a
        registry deriving pools under the configured program id.
        """
        settings = PoolSettings.from_env()
        configure_logging(settings.log_level)
        return cls(ledger, PoolRegistry(settings))

    def initialize(
        self,
        initializer: Signer,
        seed: int,
        mint_x: str,
        mint_y: str,
        fee: int,
        authority: str | None = None,
    ) -> PoolHandle:
        return initialize(
            self.ledger,
            self.registry,
            initializer,
            seed,
            mint_x,
            mint_y,
            fee,
            authority=authority,
            settings=self.registry.settings,
        )

    def deposit(
        self,
        seed: int,
        depositor: Signer,
        requested_shares: int,
        max_x: int,
        max_y: int,
    ) -> DepositResult:
        return self.registry.execute(
            seed,
            self.ledger,
            lambda handle: deposit(handle, self.ledger, depositor, requested_shares, max_x, max_y),
        )

    def withdraw(
        self,
        seed: int,
        withdrawer: Signer,
        shares_to_burn: int,
        min_x: int,
        min_y: int,
    ) -> WithdrawResult:
        return self.registry.execute(
            seed,
            self.ledger,
            lambda handle: withdraw(handle, self.ledger, withdrawer, shares_to_burn, min_x, min_y),
        )
