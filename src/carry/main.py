"""Entry point for the carry-yield estimator.

Component wiring order:
1. AppSettings (configuration)
2. Logging setup
3. HttpQuoteClient (provider endpoints from settings)
4. Wallet (explicit, from settings)
5. FastAPI app served by uvicorn, or a single estimate when the server
   is disabled (SERVER_ENABLED=false)
"""

import asyncio

import uvicorn

from carry.config import AppSettings
from carry.estimator import estimate_yield
from carry.logging import get_logger, setup_logging
from carry.quotes.http_client import HttpQuoteClient
from carry.server.app import create_app
from carry.wallet import Wallet


async def run() -> None:
    """Run the estimator as a server, or compute one estimate and exit."""
    settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("carry.main")

    client = HttpQuoteClient(settings.providers)
    wallet = Wallet.from_settings(settings.wallet)

    if not wallet.is_configured:
        logger.warning(
            "no_wallet_configured",
            note="Set WALLET_ADDRESS to display an address on the index route.",
        )

    if settings.server.enabled:
        app = create_app(client=client, wallet=wallet, strategy=settings.strategy)

        logger.info(
            "server_starting",
            host=settings.server.host,
            port=settings.server.port,
            address=wallet.display_address,
        )

        config = uvicorn.Config(
            app,
            host=settings.server.host,
            port=settings.server.port,
            log_level="warning",
        )
        server = uvicorn.Server(config)
        await server.serve()
        logger.info("server_stopped")
    else:
        breakdown = await estimate_yield(
            collateral_ratio=settings.strategy.collateral_ratio,
            days_to_redeem=settings.strategy.days_to_redeem,
            client=client,
        )
        logger.info("single_estimate", **breakdown.to_dict())


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
