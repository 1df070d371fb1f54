"""Shared test fixtures for the carry-yield estimator."""

from unittest.mock import AsyncMock

import pytest

from carry.config import AppSettings, ProviderSettings, StrategySettings, WalletSettings
from carry.quotes.models import PrimaryQuotes


@pytest.fixture
def provider_settings() -> ProviderSettings:
    """Provider settings pointing at fake URLs (never resolved in tests)."""
    return ProviderSettings(
        pool_url="https://pool.test/pools/v2/803",
        host_zone_url="https://stride.test/stakeibc/host_zone",
        lending_url="https://lending.test/assets/all",
        request_timeout_seconds=1.0,
    )


@pytest.fixture
def mock_settings(provider_settings: ProviderSettings) -> AppSettings:
    """Return AppSettings with test defaults (server disabled, dummy wallet)."""
    return AppSettings(
        log_level="DEBUG",
        providers=provider_settings,
        strategy=StrategySettings(days_to_redeem=30, collateral_ratio=1.5),
        wallet=WalletSettings(address="secret1testaddress"),
    )


@pytest.fixture
def stub_client() -> AsyncMock:
    """QuoteClient stub returning the regression quotes.

    spot 1.0, redemption 1.02, borrow 0.08, supply 0.02.
    """
    client = AsyncMock()
    client.fetch_all_primary_quotes = AsyncMock(
        return_value=PrimaryQuotes(
            spot_price=1.0,
            redemption_rate=1.02,
            borrow_rate=0.08,
        )
    )
    client.fetch_supply_rate = AsyncMock(return_value=0.02)
    return client
