"""HTTP quote client using aiohttp.

Talks to three unrelated public services:
- Osmosis pool endpoint: stATOM/ATOM reserves -> spot price
- Stride stakeibc host zones: stATOM redemption rate
- Lending market asset list: ATOM borrow APY and USDC supply APY

Every request opens and closes its own session. Nothing is cached between
calls because rates move and a stale quote would skew the estimate.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Any

import aiohttp
from pydantic import ValidationError

from carry.config import ProviderSettings
from carry.exceptions import MalformedQuote, QuoteUnavailable
from carry.logging import get_logger
from carry.quotes.client import QuoteClient
from carry.quotes.lookup import find_one, parse_rate
from carry.quotes.models import PrimaryQuotes
from carry.quotes.schemas import (
    LENDING_ASSETS,
    POOL_ASSETS,
    HostZoneResponse,
    LendingAsset,
)

logger = get_logger(__name__)

USER_AGENT = "carry-yield/0.1"

SessionFactory = Callable[[], aiohttp.ClientSession]


class HttpQuoteClient(QuoteClient):
    """Concrete quote client fetching JSON from the configured providers."""

    def __init__(
        self,
        settings: ProviderSettings,
        session_factory: SessionFactory | None = None,
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory or self._default_session

    def _default_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self._settings.request_timeout_seconds),
            headers={"User-Agent": USER_AGENT},
        )

    async def _get_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Raises:
            QuoteUnavailable: On network errors, non-2xx status, timeout or a
                body that is not JSON.
        """
        try:
            async with self._session_factory() as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            logger.warning("quote_request_timeout", url=url)
            raise QuoteUnavailable(f"timed out fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.warning("quote_request_failed", url=url, error=str(e))
            raise QuoteUnavailable(f"request to {url} failed: {e}") from e
        except ValueError as e:
            logger.warning("quote_response_not_json", url=url)
            raise QuoteUnavailable(f"response from {url} is not JSON") from e

    async def _fetch_lending_assets(self) -> list[LendingAsset]:
        payload = await self._get_json(self._settings.lending_url)
        try:
            return LENDING_ASSETS.validate_python(payload)
        except ValidationError as e:
            raise MalformedQuote(f"unexpected lending market response: {e}") from e

    async def fetch_spot_price(self) -> float:
        """Spot price in ATOM per stATOM, from the pool's two reserves."""
        s = self._settings
        payload = await self._get_json(s.pool_url)
        try:
            assets = POOL_ASSETS.validate_python(payload)
        except ValidationError as e:
            raise MalformedQuote(f"unexpected pool response: {e}") from e

        base = find_one(
            assets,
            lambda a: a.symbol == s.base_symbol,
            what=f"{s.base_symbol} pool asset",
        )
        derivative = find_one(
            assets,
            lambda a: a.symbol == s.derivative_symbol,
            what=f"{s.derivative_symbol} pool asset",
        )
        if base.amount <= 0 or derivative.amount <= 0:
            raise MalformedQuote(
                f"pool reserves must be positive: "
                f"{s.base_symbol}={base.amount}, {s.derivative_symbol}={derivative.amount}"
            )

        price = base.amount / derivative.amount
        logger.debug("quote_fetched", quote="spot_price", value=price)
        return price

    async def fetch_redemption_rate(self) -> float:
        s = self._settings
        payload = await self._get_json(s.host_zone_url)
        try:
            response = HostZoneResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedQuote(f"unexpected host zone response: {e}") from e

        zone = find_one(
            response.host_zone,
            lambda z: z.host_denom == s.host_denom,
            what=f"host zone for {s.host_denom}",
        )
        rate = parse_rate(zone.redemption_rate, field=f"{s.host_denom} redemption_rate")
        logger.debug("quote_fetched", quote="redemption_rate", value=rate)
        return rate

    async def fetch_borrow_rate(self) -> float:
        s = self._settings
        assets = await self._fetch_lending_assets()
        record = find_one(
            assets, lambda a: a.asset == s.borrow_asset, what=f"{s.borrow_asset} lending asset"
        )
        rate = parse_rate(record.borrow_apy, field=f"{s.borrow_asset} borrow_apy")
        logger.debug("quote_fetched", quote="borrow_rate", value=rate)
        return rate

    async def fetch_supply_rate(self) -> float:
        s = self._settings
        assets = await self._fetch_lending_assets()
        record = find_one(
            assets, lambda a: a.asset == s.supply_asset, what=f"{s.supply_asset} lending asset"
        )
        rate = parse_rate(record.supply_apy, field=f"{s.supply_asset} supply_apy")
        logger.debug("quote_fetched", quote="supply_rate", value=rate)
        return rate

    async def fetch_all_primary_quotes(self) -> PrimaryQuotes:
        """Fan out the three primary fetches and join them.

        The first failure cancels the requests still in flight, waits for
        them to unwind, and is re-raised unchanged.
        """
        tasks = [
            asyncio.ensure_future(self.fetch_spot_price()),
            asyncio.ensure_future(self.fetch_redemption_rate()),
            asyncio.ensure_future(self.fetch_borrow_rate()),
        ]
        started = time.monotonic()
        try:
            spot_price, redemption_rate, borrow_rate = await asyncio.gather(*tasks)
        except Exception as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.warning("quote_fetch_failed", error=str(e), kind=type(e).__name__)
            raise

        logger.info(
            "primary_quotes_fetched",
            spot_price=spot_price,
            redemption_rate=redemption_rate,
            borrow_rate=borrow_rate,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return PrimaryQuotes(
            spot_price=spot_price,
            redemption_rate=redemption_rate,
            borrow_rate=borrow_rate,
        )
