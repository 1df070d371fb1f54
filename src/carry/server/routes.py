"""Route handlers: greeting, health check, and yield estimate."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from carry.estimator import estimate_yield

router = APIRouter()


@router.get("/")
async def index(request: Request) -> JSONResponse:
    wallet = request.app.state.wallet
    return JSONResponse({"message": f"Hello World! My address is {wallet.display_address}"})


@router.get("/health")
async def health() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@router.get("/yield")
async def get_yield(
    request: Request,
    collateral_ratio: float | None = None,
    days_to_redeem: float | None = None,
) -> JSONResponse:
    """Estimate the net delta-neutral yield from live quotes.

    Query parameters fall back to the configured strategy defaults.
    """
    strategy = request.app.state.strategy
    breakdown = await estimate_yield(
        collateral_ratio=(
            strategy.collateral_ratio if collateral_ratio is None else collateral_ratio
        ),
        days_to_redeem=strategy.days_to_redeem if days_to_redeem is None else days_to_redeem,
        client=request.app.state.quote_client,
    )
    return JSONResponse(breakdown.to_dict())
