"""Tests for deterministic pool address derivation."""

import pytest
from nacl.bindings import crypto_core_ed25519_is_valid_point

from liquidity.constants import DEFAULT_PROGRAM_ID
from liquidity.derivation import (
    DerivationError,
    PoolAuthority,
    address_bytes,
    config_seeds,
    create_program_address,
    derive_pool_addresses,
    find_program_address,
)


class TestFindProgramAddress:
    """Tests for find_program_address."""

    def test_is_deterministic(self):
        assert find_program_address([b"config"], "prog") == find_program_address(
            [b"config"], "prog"
        )

    def test_address_is_off_curve(self):
        address, _bump = find_program_address([b"config", b"\x01"], "prog")
        assert address.startswith("0x")
        assert len(address_bytes(address)) == 32
        assert not crypto_core_ed25519_is_valid_point(address_bytes(address))

    def test_bump_reproduces_address(self):
        address, bump = find_program_address([b"lp"], "prog")
        assert create_program_address([b"lp", bytes([bump])], "prog") == address

    def test_program_id_changes_address(self):
        a, _ = find_program_address([b"config"], "prog-a")
        b, _ = find_program_address([b"config"], "prog-b")
        assert a != b

    def test_long_seed_rejected(self):
        with pytest.raises(DerivationError):
            create_program_address([b"x" * 33], "prog")


class TestDerivePoolAddresses:
    """Tests for derive_pool_addresses."""

    def test_seed_disambiguates_pools(self):
        a = derive_pool_addresses(1)
        b = derive_pool_addresses(2)
        assert a.config != b.config
        assert a.share_mint != b.share_mint

    def test_config_and_share_mint_differ(self):
        addresses = derive_pool_addresses(7)
        assert addresses.config != addresses.share_mint
        assert 0 <= addresses.config_bump <= 255
        assert 0 <= addresses.share_bump <= 255

    def test_config_seed_is_little_endian(self):
        assert config_seeds(1) == [b"config", b"\x01" + b"\x00" * 7]


class TestPoolAuthority:
    """Tests for the pool capability token."""

    def test_authority_resolves_to_config_address(self):
        addresses = derive_pool_addresses(9, DEFAULT_PROGRAM_ID)
        authority = PoolAuthority.for_pool(9, addresses.config_bump, DEFAULT_PROGRAM_ID)
        assert authority.address == addresses.config

    def test_authority_for_other_seed_differs(self):
        addresses = derive_pool_addresses(9)
        other = derive_pool_addresses(10)
        authority = PoolAuthority.for_pool(10, other.config_bump)
        assert authority.address != addresses.config
