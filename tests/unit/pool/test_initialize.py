"""Tests for pool initialization."""

import pytest
from pydantic import ValidationError

from liquidity.constants import SHARE_DECIMALS
from liquidity.errors import InvalidPoolAssets, PoolAlreadyExists
from liquidity.ledger import InMemoryLedger, Signer, UnknownAccount
from liquidity.pool import initialize
from liquidity.pools import PoolRegistry
from tests.helpers import ADMIN, ALICE, MINT_X, MINT_Y, MINT_Z, make_address


class TestInitialize:
    """Tests for initialize."""

    def test_creates_unlocked_empty_pool(self, ledger: InMemoryLedger):
        registry = PoolRegistry()
        handle = initialize(ledger, registry, Signer(ALICE), 42, MINT_X, MINT_Y, 30)

        assert handle.config.locked is False
        assert handle.config.fee == 30
        assert handle.config.seed == 42
        assert handle.config.mint_x == MINT_X
        assert handle.config.mint_y == MINT_Y
        assert handle.config.authority is None

        state = handle.state(ledger)
        assert (state.reserve_x, state.reserve_y, state.share_supply) == (0, 0, 0)
        assert state.is_empty

    def test_share_mint_controlled_by_pool(self, ledger: InMemoryLedger):
        handle = initialize(ledger, PoolRegistry(), Signer(ALICE), 1, MINT_X, MINT_Y, 30)
        assert ledger.decimals(handle.share_mint) == SHARE_DECIMALS
        assert handle.authority.address == handle.config_address

    def test_records_authority(self, ledger: InMemoryLedger):
        handle = initialize(
            ledger, PoolRegistry(), Signer(ALICE), 1, MINT_X, MINT_Y, 30, authority=ADMIN
        )
        assert handle.config.authority == ADMIN

    def test_registers_config(self, ledger: InMemoryLedger):
        registry = PoolRegistry()
        handle = initialize(ledger, registry, Signer(ALICE), 7, MINT_X, MINT_Y, 30)
        assert registry.get(7) == handle.config

    def test_duplicate_seed_fails(self, ledger: InMemoryLedger):
        """Initializing the same seed twice fails without touching the ledger."""
        registry = PoolRegistry()
        initialize(ledger, registry, Signer(ALICE), 7, MINT_X, MINT_Y, 30)
        with pytest.raises(PoolAlreadyExists):
            initialize(ledger, registry, Signer(ALICE), 7, MINT_X, MINT_Z, 30)
        assert len(registry) == 1

    def test_distinct_seeds_same_pair(self, ledger: InMemoryLedger):
        """The seed disambiguates pools over the same asset pair."""
        registry = PoolRegistry()
        a = initialize(ledger, registry, Signer(ALICE), 1, MINT_X, MINT_Y, 30)
        b = initialize(ledger, registry, Signer(ALICE), 2, MINT_X, MINT_Y, 30)
        assert a.config_address != b.config_address
        assert a.share_mint != b.share_mint

    def test_identical_assets_rejected(self, ledger: InMemoryLedger):
        with pytest.raises(InvalidPoolAssets):
            initialize(ledger, PoolRegistry(), Signer(ALICE), 1, MINT_X, MINT_X.upper(), 30)

    def test_unknown_asset_leaves_no_trace(self, ledger: InMemoryLedger):
        registry = PoolRegistry()
        with pytest.raises(UnknownAccount):
            initialize(ledger, registry, Signer(ALICE), 1, MINT_X, make_address("nope"), 30)
        assert 1 not in registry

    def test_fee_out_of_range(self, ledger: InMemoryLedger):
        with pytest.raises(ValidationError):
            initialize(ledger, PoolRegistry(), Signer(ALICE), 1, MINT_X, MINT_Y, 70_000)
