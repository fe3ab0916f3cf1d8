"""Pytest configuration and fixtures."""

import pytest

from liquidity.ledger import InMemoryLedger, Signer
from liquidity.pool import PoolHandle
from liquidity.service import PoolService
from tests.helpers import ALICE, BOB, make_ledger, make_pool

# Reserves and supply of the reference pool used across workflow tests
SEEDED_RESERVE_X = 1_000_000
SEEDED_RESERVE_Y = 2_000_000
SEEDED_SUPPLY = 1_000


@pytest.fixture
def alice() -> Signer:
    return Signer(ALICE)


@pytest.fixture
def bob() -> Signer:
    return Signer(BOB)


@pytest.fixture
def ledger() -> InMemoryLedger:
    """A ledger with assets X, Y, Z and funded participants."""
    return make_ledger()


@pytest.fixture
def pool(ledger: InMemoryLedger) -> tuple[PoolService, PoolHandle]:
    """An initialized, empty X/Y pool."""
    return make_pool(ledger)


@pytest.fixture
def seeded_pool(
    pool: tuple[PoolService, PoolHandle], alice: Signer
) -> tuple[PoolService, PoolHandle]:
    """An X/Y pool holding (1,000,000, 2,000,000) against 1,000 shares owned by alice."""
    service, handle = pool
    service.deposit(handle.seed, alice, SEEDED_SUPPLY, SEEDED_RESERVE_X, SEEDED_RESERVE_Y)
    return service, handle
