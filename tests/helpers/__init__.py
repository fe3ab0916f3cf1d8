"""Test helpers module for shared test utilities.

- constants: Participant and asset addresses, default amounts
- factories: Ledger and pool factory functions
"""

from tests.helpers.constants import (
    ADMIN,
    ALICE,
    BOB,
    ISSUER,
    MINT_X,
    MINT_Y,
    MINT_Z,
    POOL_FEE,
    POOL_SEED,
    STARTING_BALANCE,
    make_address,
)
from tests.helpers.factories import fund, make_ledger, make_pool

__all__ = [
    # Constants
    "ADMIN",
    "ALICE",
    "BOB",
    "ISSUER",
    "MINT_X",
    "MINT_Y",
    "MINT_Z",
    "POOL_FEE",
    "POOL_SEED",
    "STARTING_BALANCE",
    "make_address",
    # Factories
    "fund",
    "make_ledger",
    "make_pool",
]
