"""Ledger interface driven by the pool workflows.

The pool never moves tokens itself. It asks a Ledger to transfer, mint and
burn, presenting either a caller's Signer or the pool's own PoolAuthority as
proof of authorization. Each call either fully applies or raises.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from liquidity.derivation import PoolAuthority


@dataclass(frozen=True)
class Signer:
    """A caller whose identity has already been verified upstream."""

    address: str


Authorizer: TypeAlias = Signer | PoolAuthority


class LedgerError(Exception):
    """Base error for ledger operations."""

    pass


class InsufficientFunds(LedgerError):
    """Source balance is below the requested amount."""

    pass


class Unauthorized(LedgerError):
    """Authorizer does not control the source account or mint."""

    pass


class UnknownAccount(LedgerError):
    """Referenced mint or token account does not exist."""

    pass


class AccountExists(LedgerError):
    """Mint or token account was already created."""

    pass


class BalanceOverflow(LedgerError):
    """Credit would push a balance or supply past u64."""

    pass


@runtime_checkable
class Ledger(Protocol):
    """Token ledger the pool drives.

    Token accounts are identified by (owner, mint). Mints carry a supply,
    a decimal count and the authority allowed to mint.
    """

    def create_mint(self, mint: str, decimals: int, authority: str) -> None:
        """Create a mint with zero supply controlled by authority."""
        ...

    def create_account(self, owner: str, mint: str) -> None:
        """Create an empty token account for owner holding mint."""
        ...

    def has_account(self, owner: str, mint: str) -> bool:
        """True if the token account exists."""
        ...

    def balance(self, owner: str, mint: str) -> int:
        """Balance of owner's account for mint."""
        ...

    def supply(self, mint: str) -> int:
        """Total issued supply of mint."""
        ...

    def transfer(
        self,
        asset: str,
        source: str,
        destination: str,
        amount: int,
        authorizer: Authorizer,
    ) -> None:
        """Move amount of asset from source's account to destination's."""
        ...

    def mint(self, share_asset: str, to: str, amount: int, pool_authorization: Authorizer) -> None:
        """Issue amount of share_asset into to's account."""
        ...

    def burn(self, share_asset: str, source: str, amount: int, owner_authorization: Signer) -> None:
        """Destroy amount of share_asset held by source."""
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Context in which all effects commit together or not at all."""
        ...
