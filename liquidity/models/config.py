"""Pool configuration record.

One record per pool, created by initialization and never destroyed by the
pool core. Deposit and withdraw read it; only the lock flag is consulted.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from liquidity.models.types import U8, U16, U64, Address


class PoolConfig(BaseModel):
    """Identity and policy of a two-asset pool.

    Attributes:
        seed: Disambiguates pools over the same asset pair
        authority: Optional owner, used outside the core (e.g. to toggle lock)
        mint_x: Identifier of pooled asset X
        mint_y: Identifier of pooled asset Y
        fee: Fee parameter in basis points, stored for swaps
        locked: When true, deposit and withdraw are refused
        config_bump: Derivation bump of the config address
        share_bump: Derivation bump of the share mint address
    """

    model_config = ConfigDict(frozen=True)

    seed: U64
    authority: Address | None = None
    mint_x: Address
    mint_y: Address
    fee: U16
    locked: bool = False
    config_bump: U8
    share_bump: U8

    @model_validator(mode="after")
    def check_distinct_assets(self) -> "PoolConfig":
        if self.mint_x == self.mint_y:
            raise ValueError(f"Pool assets must differ: {self.mint_x}")
        return self

    @property
    def asset_x_id(self) -> str:
        return self.mint_x

    @property
    def asset_y_id(self) -> str:
        return self.mint_y

    def with_lock(self, locked: bool) -> "PoolConfig":
        """Return a copy with the lock flag set.

        Administrative processes use this; the pool workflows never call it.
        """
        return self.model_copy(update={"locked": locked})


class PoolState(BaseModel):
    """Snapshot of a pool's reserves and share supply."""

    model_config = ConfigDict(frozen=True)

    reserve_x: U64
    reserve_y: U64
    share_supply: U64 = Field(description="Total shares issued")

    @property
    def is_empty(self) -> bool:
        return self.share_supply == 0 and self.reserve_x == 0 and self.reserve_y == 0
