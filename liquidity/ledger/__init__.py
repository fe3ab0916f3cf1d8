"""Ledger collaborators: the protocol the pool drives and a reference implementation."""

from liquidity.ledger.base import (
    AccountExists,
    Authorizer,
    BalanceOverflow,
    InsufficientFunds,
    Ledger,
    LedgerError,
    Signer,
    Unauthorized,
    UnknownAccount,
)
from liquidity.ledger.memory import InMemoryLedger, MintInfo

__all__ = [
    "Ledger",
    "InMemoryLedger",
    "MintInfo",
    "Signer",
    "Authorizer",
    "LedgerError",
    "InsufficientFunds",
    "Unauthorized",
    "UnknownAccount",
    "AccountExists",
    "BalanceOverflow",
]
