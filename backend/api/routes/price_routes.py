"""
API — 外匯報價路由（OANDA pricing 透傳）。
"""

from fastapi import APIRouter, HTTPException, Query, Request

from api.rate_limit import limiter
from application.pricing_service import PricingUnavailableError, get_prices
from domain.constants import (
    ERROR_PRICING_UNAVAILABLE,
    GENERIC_PRICING_ERROR,
    PRICES_RATE_LIMIT,
)
from logging_config import get_logger

router = APIRouter(tags=["Prices"])
logger = get_logger(__name__)


@router.get("/prices", summary="Current prices from the forex provider")
@limiter.limit(PRICES_RATE_LIMIT)
def get_prices_route(
    request: Request,
    instruments: str | None = Query(
        default=None,
        description="Comma-separated OANDA instruments, e.g. EUR_USD,USD_JPY",
    ),
) -> dict:
    """回傳報價供應商的原始回應；上游失敗時回傳 502。"""
    logger.info("API Call: /prices")
    requested = (
        [i.strip().upper() for i in instruments.split(",") if i.strip()]
        if instruments
        else None
    )
    try:
        return get_prices(requested)
    except PricingUnavailableError:
        raise HTTPException(
            status_code=502,
            detail={
                "error_code": ERROR_PRICING_UNAVAILABLE,
                "detail": GENERIC_PRICING_ERROR,
            },
        )
