"""Yield calculator -- pure arithmetic from quotes to net delta-neutral yield."""

from carry.yield_calc.calculator import (
    DAYS_PER_YEAR,
    calc_annualized_arb,
    calc_arb,
    calc_net_borrow_rate,
    calc_net_delta_neutral,
)

__all__ = [
    "DAYS_PER_YEAR",
    "calc_annualized_arb",
    "calc_arb",
    "calc_net_borrow_rate",
    "calc_net_delta_neutral",
]
