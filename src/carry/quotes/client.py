"""Abstract quote client interface.

Defines the contract for quote providers. The estimator and calculator
depend only on this interface, keeping transport details isolated in the
concrete HTTP implementation.
"""

from abc import ABC, abstractmethod

from carry.quotes.models import PrimaryQuotes


class QuoteClient(ABC):
    """Abstract base class for market quote sources."""

    @abstractmethod
    async def fetch_spot_price(self) -> float:
        """Fetch the derivative-token price in base-token units."""
        ...

    @abstractmethod
    async def fetch_redemption_rate(self) -> float:
        """Fetch the contractual derivative-to-base redemption rate."""
        ...

    @abstractmethod
    async def fetch_borrow_rate(self) -> float:
        """Fetch the annualized base-token borrow rate."""
        ...

    @abstractmethod
    async def fetch_supply_rate(self) -> float:
        """Fetch the annualized stable-asset supply rate.

        Always a fresh request; implementations must not reuse the
        response from ``fetch_borrow_rate`` even when the provider is shared.
        """
        ...

    @abstractmethod
    async def fetch_all_primary_quotes(self) -> PrimaryQuotes:
        """Fetch spot price, redemption rate and borrow rate concurrently.

        Fails as a whole if any single fetch fails; no partial result.
        """
        ...
