"""FastAPI application factory.

All collaborators (quote client, wallet, strategy defaults) are passed in
and stored on ``app.state``; route handlers read them from the request.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from carry.config import StrategySettings
from carry.exceptions import InvalidArbRatio, MalformedQuote, QuoteUnavailable
from carry.logging import get_logger
from carry.quotes.client import QuoteClient
from carry.server import routes
from carry.wallet import Wallet

logger = get_logger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def _upstream_error(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("yield_request_upstream_error", path=request.url.path, error=str(exc))
    return _error_response(502, exc)


async def _invalid_input(request: Request, exc: Exception) -> JSONResponse:
    logger.info("yield_request_invalid", path=request.url.path, error=str(exc))
    return _error_response(422, exc)


def create_app(
    client: QuoteClient,
    wallet: Wallet,
    strategy: StrategySettings | None = None,
    lifespan: Any = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        client: Quote source used for every yield request.
        wallet: Wallet identity shown on the index route.
        strategy: Default collateral ratio and redemption horizon.
        lifespan: Optional async context manager for startup/shutdown.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(title="stATOM Carry Yield", lifespan=lifespan)

    app.state.quote_client = client
    app.state.wallet = wallet
    app.state.strategy = strategy or StrategySettings()

    app.add_exception_handler(QuoteUnavailable, _upstream_error)
    app.add_exception_handler(MalformedQuote, _upstream_error)
    app.add_exception_handler(InvalidArbRatio, _invalid_input)

    app.include_router(routes.router)

    return app
