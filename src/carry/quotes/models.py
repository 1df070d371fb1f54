"""Quote value types returned by the fetcher.

Rates are plain floats: every provider encodes them as decimal strings
and the yield math uses fractional exponents, so Decimal buys nothing here.
"""

import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PrimaryQuotes:
    """The three independent quotes fetched together for one estimate."""

    spot_price: float  # ATOM per stATOM on the liquidity pool
    redemption_rate: float  # ATOM per stATOM at redemption
    borrow_rate: float  # annualized ATOM borrow APY as a fraction
    fetched_at: float = field(default_factory=time.time)
