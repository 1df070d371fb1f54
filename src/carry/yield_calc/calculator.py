"""Carry-trade yield arithmetic.

Strategy: buy stATOM on the pool below its redemption rate, redeem after the
unbonding period, and fund the position by borrowing ATOM against collateral
while earning the supply rate on a stable asset.

All inputs and outputs are fractions except ``calc_annualized_arb``, which
returns a percentage. Rates are annualized over a 365-day year.
"""

import math
from collections.abc import Awaitable, Callable

from carry.exceptions import InvalidArbRatio

DAYS_PER_YEAR = 365

SupplyRateProvider = Callable[[], Awaitable[float]]


def calc_arb(redemption_rate: float, spot_price: float) -> float:
    """Ratio of redemption value to market price for one stATOM.

    Args:
        redemption_rate: ATOM received per stATOM at redemption.
        spot_price: ATOM paid per stATOM on the pool.

    Raises:
        InvalidArbRatio: If ``spot_price`` is not a positive finite number or
            ``redemption_rate`` is negative or non-finite.
    """
    if not (math.isfinite(spot_price) and spot_price > 0):
        raise InvalidArbRatio(f"spot price must be positive and finite, got {spot_price}")
    if not (math.isfinite(redemption_rate) and redemption_rate >= 0):
        raise InvalidArbRatio(
            f"redemption rate must be non-negative and finite, got {redemption_rate}"
        )
    return redemption_rate / spot_price


def calc_annualized_arb(arb_ratio: float, days_to_redeem: float) -> float:
    """Compound one redemption cycle's ratio over a year, as a percentage.

    Formula: (arb_ratio ** (365 / days_to_redeem) - 1) * 100

    Raises:
        InvalidArbRatio: If ``days_to_redeem`` is not a positive finite number,
            ``arb_ratio`` is negative or non-finite, or the compounded value overflows.
    """
    if not (math.isfinite(days_to_redeem) and days_to_redeem > 0):
        raise InvalidArbRatio(
            f"days to redeem must be positive and finite, got {days_to_redeem}"
        )
    if not (math.isfinite(arb_ratio) and arb_ratio >= 0):
        raise InvalidArbRatio(f"arb ratio must be non-negative and finite, got {arb_ratio}")

    try:
        compounded = arb_ratio ** (DAYS_PER_YEAR / days_to_redeem)
    except OverflowError as e:
        raise InvalidArbRatio(
            f"annualizing arb ratio {arb_ratio} over {days_to_redeem} days overflows"
        ) from e
    if not math.isfinite(compounded):
        raise InvalidArbRatio(
            f"annualizing arb ratio {arb_ratio} over {days_to_redeem} days overflows"
        )
    return (compounded - 1) * 100


async def calc_net_borrow_rate(
    borrow_rate: float,
    collateral_ratio: float,
    supply_rate_provider: SupplyRateProvider,
) -> float:
    """Borrow cost scaled by leverage, net of the funding leg's supply yield.

    The supply rate is fetched here, on demand, through the injected provider
    (normally ``QuoteClient.fetch_supply_rate``).

    Formula: borrow_rate * collateral_ratio - supply_rate
    """
    supply_rate = await supply_rate_provider()
    return borrow_rate * collateral_ratio - supply_rate


def calc_net_delta_neutral(
    annualized_arb: float,
    collateral_ratio: float,
    net_borrow_rate: float,
) -> float:
    """Leveraged annualized arb minus net borrow cost."""
    return annualized_arb * collateral_ratio - net_borrow_rate
