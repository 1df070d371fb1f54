"""Yield estimation pipeline -- the single entry point callers use.

Wires the quote client into the calculator:

    fetch_all_primary_quotes -> calc_arb -> calc_annualized_arb
        -> calc_net_borrow_rate (fetches supply rate) -> calc_net_delta_neutral

Errors from either layer propagate unchanged; nothing is defaulted or retried.
"""

import math
from dataclasses import asdict, dataclass

from carry.exceptions import InvalidArbRatio
from carry.logging import get_logger
from carry.quotes.client import QuoteClient
from carry.yield_calc.calculator import (
    calc_annualized_arb,
    calc_arb,
    calc_net_borrow_rate,
    calc_net_delta_neutral,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class YieldBreakdown:
    """Every input and intermediate value of one yield estimate."""

    spot_price: float
    redemption_rate: float
    borrow_rate: float
    supply_rate: float
    collateral_ratio: float
    days_to_redeem: float
    arb_ratio: float
    annualized_arb: float  # percent
    net_borrow_rate: float
    net_delta_neutral: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


async def estimate_yield(
    collateral_ratio: float,
    days_to_redeem: float,
    client: QuoteClient,
) -> YieldBreakdown:
    """Run the full pipeline and return all intermediate values.

    Args:
        collateral_ratio: Leverage applied to both the arb and the borrow leg.
        days_to_redeem: Unbonding period in days.
        client: Source of live quotes.

    Raises:
        QuoteUnavailable: A provider request failed or a record was missing.
        MalformedQuote: A provider record could not be parsed.
        InvalidArbRatio: An arithmetic precondition was violated.
    """
    if not (math.isfinite(collateral_ratio) and collateral_ratio > 0):
        raise InvalidArbRatio(
            f"collateral ratio must be positive and finite, got {collateral_ratio}"
        )
    if not (math.isfinite(days_to_redeem) and days_to_redeem > 0):
        raise InvalidArbRatio(
            f"days to redeem must be positive and finite, got {days_to_redeem}"
        )

    quotes = await client.fetch_all_primary_quotes()

    arb_ratio = calc_arb(quotes.redemption_rate, quotes.spot_price)
    annualized_arb = calc_annualized_arb(arb_ratio, days_to_redeem)

    supply_rates: list[float] = []

    async def _supply_rate() -> float:
        rate = await client.fetch_supply_rate()
        supply_rates.append(rate)
        return rate

    net_borrow_rate = await calc_net_borrow_rate(
        quotes.borrow_rate, collateral_ratio, _supply_rate
    )
    net_delta_neutral = calc_net_delta_neutral(
        annualized_arb, collateral_ratio, net_borrow_rate
    )

    breakdown = YieldBreakdown(
        spot_price=quotes.spot_price,
        redemption_rate=quotes.redemption_rate,
        borrow_rate=quotes.borrow_rate,
        supply_rate=supply_rates[0],
        collateral_ratio=collateral_ratio,
        days_to_redeem=days_to_redeem,
        arb_ratio=arb_ratio,
        annualized_arb=annualized_arb,
        net_borrow_rate=net_borrow_rate,
        net_delta_neutral=net_delta_neutral,
    )
    logger.info(
        "yield_computed",
        collateral_ratio=collateral_ratio,
        days_to_redeem=days_to_redeem,
        arb_ratio=arb_ratio,
        annualized_arb=annualized_arb,
        net_delta_neutral=net_delta_neutral,
    )
    return breakdown


async def compute_yield(
    collateral_ratio: float,
    days_to_redeem: float,
    client: QuoteClient,
) -> float:
    """Return the net delta-neutral yield for the given position parameters."""
    breakdown = await estimate_yield(collateral_ratio, days_to_redeem, client)
    return breakdown.net_delta_neutral
