"""Runtime settings for the liquidity pool."""

import os
from dataclasses import dataclass

from liquidity.constants import DEFAULT_PROGRAM_ID, MAX_PRECISION, SHARE_DECIMALS


@dataclass(frozen=True)
class PoolSettings:
    """Centralized configuration for pool deployment.

    Attributes:
        program_id: Program identity pool addresses are derived under
        share_decimals: Decimal places of newly created share mints
        log_level: Minimum structlog level (name, e.g. "INFO")
    """

    program_id: str = DEFAULT_PROGRAM_ID
    share_decimals: int = SHARE_DECIMALS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 <= self.share_decimals <= MAX_PRECISION:
            raise ValueError(
                f"share_decimals must be in [0, {MAX_PRECISION}]: {self.share_decimals}"
            )
        if not self.program_id:
            raise ValueError("program_id cannot be empty")

    @classmethod
    def from_env(cls) -> "PoolSettings":
        """Build settings from environment variables.

        - LIQUIDITY_PROGRAM_ID: Program id (default: system program id)
        - LIQUIDITY_SHARE_DECIMALS: Share mint decimals (default: 6)
        - LIQUIDITY_LOG_LEVEL: Log level name (default: INFO)
        """
        return cls(
            program_id=os.environ.get("LIQUIDITY_PROGRAM_ID", DEFAULT_PROGRAM_ID),
            share_decimals=int(os.environ.get("LIQUIDITY_SHARE_DECIMALS", str(SHARE_DECIMALS))),
            log_level=os.environ.get("LIQUIDITY_LOG_LEVEL", "INFO").upper(),
        )


# Default configuration instance
DEFAULT_POOL_SETTINGS = PoolSettings()
