"""Deterministic address derivation for pool accounts.

Pool-owned accounts have no private key. Their addresses are derived from a
list of seeds and the program id:

    address = sha256(seed_0 || ... || seed_n || bump || program_id || MARKER)

searching bump from 255 downwards until the digest is NOT a valid ed25519
point, so no signing key can ever exist for it. The pool proves a call
originates from itself by presenting a PoolAuthority built from the same
seeds, which the ledger re-derives and compares.

Pool config address: seeds ["config", seed as little-endian u64]
Share mint address:  seeds ["lp", config address bytes]
"""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass

from nacl.bindings import crypto_core_ed25519_is_valid_point

from liquidity.constants import CONFIG_SEED, DEFAULT_PROGRAM_ID, SHARE_SEED

PDA_MARKER = b"ProgramDerivedAddress"
MAX_SEED_LEN = 32


class DerivationError(Exception):
    """No off-curve address exists for the given seeds."""

    pass


def _program_bytes(program_id: str) -> bytes:
    return hashlib.sha256(program_id.encode()).digest()


def create_program_address(seeds: list[bytes], program_id: str) -> str:
    """Hash seeds (bump included) into a candidate address.

    Raises:
        DerivationError: If a seed is too long or the digest lies on the curve
    """
    hasher = hashlib.sha256()
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise DerivationError(f"Seed exceeds {MAX_SEED_LEN} bytes: {seed!r}")
        hasher.update(seed)
    hasher.update(_program_bytes(program_id))
    hasher.update(PDA_MARKER)
    digest = hasher.digest()
    if crypto_core_ed25519_is_valid_point(digest):
        raise DerivationError("Derived address lies on the ed25519 curve")
    return "0x" + digest.hex()


def find_program_address(seeds: list[bytes], program_id: str) -> tuple[str, int]:
    """Find the first off-curve address for seeds, searching bump 255..0.

    Returns:
        Tuple of (address, bump)

    Raises:
        DerivationError: If every bump yields an on-curve digest
    """
    for bump in range(255, -1, -1):
        try:
            return create_program_address([*seeds, bytes([bump])], program_id), bump
        except DerivationError:
            continue
    raise DerivationError(f"Unable to find a viable bump for seeds {seeds!r}")


def address_bytes(address: str) -> bytes:
    return bytes.fromhex(address[2:])


def config_seeds(seed: int) -> list[bytes]:
    return [CONFIG_SEED, struct.pack("<Q", seed)]


def share_seeds(config_address: str) -> list[bytes]:
    return [SHARE_SEED, address_bytes(config_address)]


@dataclass(frozen=True)
class PoolAddresses:
    """Derived addresses of one pool and their bumps."""

    config: str
    config_bump: int
    share_mint: str
    share_bump: int


def derive_pool_addresses(seed: int, program_id: str = DEFAULT_PROGRAM_ID) -> PoolAddresses:
    """Derive the config and share mint addresses of the pool with this seed."""
    config, config_bump = find_program_address(config_seeds(seed), program_id)
    share_mint, share_bump = find_program_address(share_seeds(config), program_id)
    return PoolAddresses(
        config=config,
        config_bump=config_bump,
        share_mint=share_mint,
        share_bump=share_bump,
    )


@dataclass(frozen=True)
class PoolAuthority:
    """Capability proving a ledger call originates from the pool itself.

    Holds the seeds and bump the pool address was derived from; the ledger
    accepts it for accounts owned by (or mints controlled by) `address` only
    if re-deriving the seeds under `program_id` yields that address.
    """

    seeds: tuple[bytes, ...]
    bump: int
    program_id: str

    @property
    def address(self) -> str:
        return create_program_address([*self.seeds, bytes([self.bump])], self.program_id)

    @classmethod
    def for_pool(cls, seed: int, bump: int, program_id: str = DEFAULT_PROGRAM_ID) -> PoolAuthority:
        return cls(seeds=tuple(config_seeds(seed)), bump=bump, program_id=program_id)


__all__ = [
    "DerivationError",
    "PoolAddresses",
    "PoolAuthority",
    "create_program_address",
    "derive_pool_addresses",
    "find_program_address",
]
