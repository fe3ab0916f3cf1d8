"""Pool registry: config persistence and serialized execution.

The registry stores one PoolConfig per seed and runs operations against a
pool one at a time. Each operation is loaded, executed and committed inside
the ledger's atomic() block, so operation N+1 always starts from the fully
applied result of operation N and a failure leaves no trace.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from typing import TypeVar

import structlog

from liquidity.errors import PoolAlreadyExists, PoolNotFound
from liquidity.ledger.base import Ledger
from liquidity.models.config import PoolConfig
from liquidity.pool.handle import PoolHandle
from liquidity.settings import DEFAULT_POOL_SETTINGS, PoolSettings

logger = structlog.get_logger()

T = TypeVar("T")


class PoolRegistry:
    """Registry of pool configurations keyed by seed.

    Operations on the same pool are serialized by a per-pool lock; pools
    with different seeds never contend on it.
    """

    def __init__(self, settings: PoolSettings = DEFAULT_POOL_SETTINGS) -> None:
        self.settings = settings
        self._configs: dict[int, PoolConfig] = {}
        self._locks: dict[int, threading.Lock] = {}
        # Guards _configs and _locks themselves
        self._guard = threading.Lock()

    def __contains__(self, seed: object) -> bool:
        with self._guard:
            return seed in self._configs

    def __len__(self) -> int:
        with self._guard:
            return len(self._configs)

    def __iter__(self) -> Iterator[PoolConfig]:
        with self._guard:
            configs = list(self._configs.values())
        return iter(configs)

    def register(self, config: PoolConfig) -> None:
        """Store a new pool config.

        Raises:
            PoolAlreadyExists: If a config with the same seed is stored
        """
        with self._guard:
            if config.seed in self._configs:
                raise PoolAlreadyExists(f"Pool with seed {config.seed} already exists")
            self._configs[config.seed] = config
            self._locks[config.seed] = threading.Lock()
        logger.debug("pool_registered", seed=config.seed)

    def get(self, seed: int) -> PoolConfig:
        """Load the config stored for seed.

        Raises:
            PoolNotFound: If no pool is registered under seed
        """
        with self._guard:
            config = self._configs.get(seed)
        if config is None:
            raise PoolNotFound(f"No pool with seed {seed}")
        return config

    def update(self, config: PoolConfig) -> None:
        """Replace the stored config of an existing pool.

        Raises:
            PoolNotFound: If no pool is registered under config.seed
        """
        with self._guard:
            if config.seed not in self._configs:
                raise PoolNotFound(f"No pool with seed {config.seed}")
            self._configs[config.seed] = config

    def handle(self, seed: int) -> PoolHandle:
        """Build a PoolHandle for the stored config of seed."""
        return PoolHandle.from_config(
            self.get(seed),
            program_id=self.settings.program_id,
            share_decimals=self.settings.share_decimals,
        )

    def _lock_for(self, seed: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(seed)
        if lock is None:
            raise PoolNotFound(f"No pool with seed {seed}")
        return lock

    def execute(self, seed: int, ledger: Ledger, operation: Callable[[PoolHandle], T]) -> T:
        """Run operation against pool seed as one indivisible unit.

        The config is loaded under the pool's lock, and all ledger effects
        of operation commit together or are rolled back if it raises.

        Args:
            seed: Pool to operate on
            ledger: Ledger holding the pool's reserves and share mint
            operation: Callable receiving the freshly loaded PoolHandle

        Returns:
            Whatever operation returns

        Raises:
            PoolNotFound: If no pool is registered under seed
            Exception: Whatever operation raises, after rollback
        """
        with self._lock_for(seed):
            handle = self.handle(seed)
            try:
                with ledger.atomic():
                    return operation(handle)
            except Exception as err:
                logger.warning(
                    "pool_operation_rolled_back",
                    seed=seed,
                    error=type(err).__name__,
                )
                raise
