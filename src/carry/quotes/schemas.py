"""Provider response schemas, validated at the I/O boundary.

Each provider returns loosely typed JSON. These models pin down the
fields we read; anything else in the payload is ignored. Rate fields are
kept as strings here and converted by ``parse_rate`` so that a bad value
in one record is reported against that record only.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class PoolAsset(BaseModel):
    """One side of a liquidity pool (Osmosis pools v2 endpoint)."""

    symbol: str
    amount: float = Field(allow_inf_nan=False)


class HostZone(BaseModel):
    """A Stride stakeibc host zone."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    chain_id: str = ""
    host_denom: str
    redemption_rate: str | None = None


class HostZoneResponse(BaseModel):
    host_zone: list[HostZone]


class LendingAsset(BaseModel):
    """A lending-market asset record with borrow and supply APYs."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    asset: str
    borrow_apy: str | None = None
    supply_apy: str | None = None


POOL_ASSETS = TypeAdapter(list[PoolAsset])
LENDING_ASSETS = TypeAdapter(list[LendingAsset])
