"""In-memory reference ledger.

Implements the Ledger protocol with plain dictionaries. atomic() snapshots
the whole state and restores it if the block raises, giving the
all-or-nothing commit the pool workflows rely on.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from liquidity.constants import U64_MAX
from liquidity.derivation import DerivationError, PoolAuthority
from liquidity.ledger.base import (
    AccountExists,
    Authorizer,
    BalanceOverflow,
    InsufficientFunds,
    Signer,
    Unauthorized,
    UnknownAccount,
)

logger = structlog.get_logger()


@dataclass
class MintInfo:
    """Mint record: decimal places, mint authority and issued supply."""

    decimals: int
    authority: str
    supply: int = 0


class InMemoryLedger:
    """Dictionary-backed ledger.

    Destination accounts are created on first credit; source accounts must
    exist. atomic() holds a re-entrant lock, so concurrent callers that wrap
    their calls in it never observe each other's partial effects.
    """

    def __init__(self) -> None:
        self._mints: dict[str, MintInfo] = {}
        self._accounts: dict[tuple[str, str], int] = {}
        self._lock = threading.RLock()

    # --- Accounts ---

    def create_mint(self, mint: str, decimals: int, authority: str) -> None:
        if mint in self._mints:
            raise AccountExists(f"Mint already exists: {mint}")
        self._mints[mint] = MintInfo(decimals=decimals, authority=authority)

    def create_account(self, owner: str, mint: str) -> None:
        self._require_mint(mint)
        key = (owner, mint)
        if key in self._accounts:
            raise AccountExists(f"Token account already exists: {owner} / {mint}")
        self._accounts[key] = 0

    def has_account(self, owner: str, mint: str) -> bool:
        return (owner, mint) in self._accounts

    def balance(self, owner: str, mint: str) -> int:
        key = (owner, mint)
        if key not in self._accounts:
            raise UnknownAccount(f"No token account for {owner} / {mint}")
        return self._accounts[key]

    def supply(self, mint: str) -> int:
        return self._require_mint(mint).supply

    def decimals(self, mint: str) -> int:
        return self._require_mint(mint).decimals

    # --- Movements ---

    def transfer(
        self,
        asset: str,
        source: str,
        destination: str,
        amount: int,
        authorizer: Authorizer,
    ) -> None:
        self._require_mint(asset)
        self._authorize(source, authorizer)
        if source != destination:
            self._check_credit(destination, asset, amount)
        self._debit(source, asset, amount)
        self._credit(destination, asset, amount)

    def mint(self, share_asset: str, to: str, amount: int, pool_authorization: Authorizer) -> None:
        info = self._require_mint(share_asset)
        self._authorize(info.authority, pool_authorization)
        if info.supply + amount > U64_MAX:
            raise BalanceOverflow(f"Supply of {share_asset} would exceed u64")
        self._credit(to, share_asset, amount)
        info.supply += amount

    def burn(self, share_asset: str, source: str, amount: int, owner_authorization: Signer) -> None:
        info = self._require_mint(share_asset)
        if not isinstance(owner_authorization, Signer):
            raise Unauthorized("Burn requires the account owner's signature")
        self._authorize(source, owner_authorization)
        self._debit(source, share_asset, amount)
        info.supply -= amount

    # --- Atomicity ---

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Run a block of ledger calls as one unit; roll back on any exception."""
        with self._lock:
            mints = copy.deepcopy(self._mints)
            accounts = dict(self._accounts)
            try:
                yield
            except BaseException:
                self._mints = mints
                self._accounts = accounts
                logger.debug("ledger_rolled_back")
                raise

    # --- Internals ---

    def _require_mint(self, mint: str) -> MintInfo:
        info = self._mints.get(mint)
        if info is None:
            raise UnknownAccount(f"Unknown mint: {mint}")
        return info

    def _authorize(self, owner: str, authorizer: Authorizer) -> None:
        if isinstance(authorizer, Signer):
            if authorizer.address == owner:
                return
        elif isinstance(authorizer, PoolAuthority):
            try:
                if authorizer.address == owner:
                    return
            except DerivationError as err:
                raise Unauthorized(f"Invalid pool authority: {err}") from err
        raise Unauthorized(f"Authorizer does not control {owner}")

    def _debit(self, owner: str, mint: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        current = self.balance(owner, mint)
        if current < amount:
            raise InsufficientFunds(
                f"Balance {current} of {owner} / {mint} is below {amount}"
            )
        self._accounts[(owner, mint)] = current - amount

    def _check_credit(self, owner: str, mint: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        if self._accounts.get((owner, mint), 0) + amount > U64_MAX:
            raise BalanceOverflow(f"Balance of {owner} / {mint} would exceed u64")

    def _credit(self, owner: str, mint: str, amount: int) -> None:
        self._check_credit(owner, mint, amount)
        key = (owner, mint)
        self._accounts[key] = self._accounts.get(key, 0) + amount
