"""Pool workflows: initialization, deposit and withdraw."""

from liquidity.pool.deposit import DepositResult, deposit
from liquidity.pool.handle import PoolHandle
from liquidity.pool.initialize import initialize
from liquidity.pool.withdraw import WithdrawResult, withdraw

__all__ = [
    "PoolHandle",
    "initialize",
    "deposit",
    "DepositResult",
    "withdraw",
    "WithdrawResult",
]
