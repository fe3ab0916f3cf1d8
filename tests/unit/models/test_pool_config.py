"""Tests for the pool configuration models."""

import pytest
from pydantic import ValidationError

from liquidity.constants import U16_MAX, U64_MAX
from liquidity.models import PoolConfig, PoolState, normalize_address
from tests.helpers import ADMIN, MINT_X, MINT_Y


def make_config(**overrides) -> PoolConfig:
    fields = {
        "seed": 1,
        "mint_x": MINT_X,
        "mint_y": MINT_Y,
        "fee": 30,
        "config_bump": 255,
        "share_bump": 254,
    }
    fields.update(overrides)
    return PoolConfig(**fields)


class TestPoolConfig:
    """Tests for PoolConfig validation."""

    def test_defaults(self):
        """A new config is unlocked and has no authority."""
        config = make_config()
        assert config.locked is False
        assert config.authority is None
        assert config.asset_x_id == MINT_X
        assert config.asset_y_id == MINT_Y

    def test_authority_is_optional(self):
        assert make_config(authority=ADMIN).authority == ADMIN

    def test_seed_and_fee_bounds(self):
        assert make_config(seed=U64_MAX, fee=U16_MAX).seed == U64_MAX
        with pytest.raises(ValidationError):
            make_config(seed=U64_MAX + 1)
        with pytest.raises(ValidationError):
            make_config(seed=-1)
        with pytest.raises(ValidationError):
            make_config(fee=U16_MAX + 1)
        with pytest.raises(ValidationError):
            make_config(config_bump=256)

    def test_rejects_non_int_values(self):
        with pytest.raises(ValidationError):
            make_config(fee="30")
        with pytest.raises(ValidationError):
            make_config(seed=True)

    def test_rejects_invalid_address(self):
        with pytest.raises(ValidationError):
            make_config(mint_x="0x1234")

    def test_rejects_identical_assets(self):
        with pytest.raises(ValidationError):
            make_config(mint_y=MINT_X)

    def test_is_frozen(self):
        config = make_config()
        with pytest.raises(ValidationError):
            config.locked = True  # type: ignore[misc]

    def test_with_lock_returns_copy(self):
        config = make_config()
        locked = config.with_lock(True)
        assert locked.locked is True
        assert config.locked is False
        assert locked.seed == config.seed


class TestPoolState:
    def test_is_empty(self):
        assert PoolState(reserve_x=0, reserve_y=0, share_supply=0).is_empty
        assert not PoolState(reserve_x=1, reserve_y=0, share_supply=0).is_empty


class TestAddresses:
    def test_normalize_address(self):
        assert normalize_address(MINT_X.upper().replace("0X", "")) == MINT_X
