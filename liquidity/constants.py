"""Protocol constants for the liquidity pool.

Centralizes integer widths, seed prefixes and share-mint parameters.
"""

from liquidity.safe_int import U64_MAX, U128_MAX

U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1

# Share mint decimals (matches the pooled assets' base-unit convention)
SHARE_DECIMALS = 6

# Largest decimal precision the curve accepts for a share mint
MAX_PRECISION = 18

# Seed prefixes for deterministic address derivation
CONFIG_SEED = b"config"
SHARE_SEED = b"lp"

# Program identity the pool addresses are derived under
DEFAULT_PROGRAM_ID = "11111111111111111111111111111111"

__all__ = [
    "U8_MAX",
    "U16_MAX",
    "U64_MAX",
    "U128_MAX",
    "SHARE_DECIMALS",
    "MAX_PRECISION",
    "CONFIG_SEED",
    "SHARE_SEED",
    "DEFAULT_PROGRAM_ID",
]
