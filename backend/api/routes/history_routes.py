"""
API — 歷史日線資料路由（Kibot）。
"""

from fastapi import APIRouter, HTTPException

from api.schemas import BarResponse, HistoryResponse
from application.historical_data_service import get_daily_series
from domain.constants import ERROR_HISTORY_UNAVAILABLE, GENERIC_HISTORY_ERROR

router = APIRouter(prefix="/history", tags=["History"])


@router.get(
    "/{symbol}",
    response_model=HistoryResponse,
    summary="Daily OHLCV bars for the last 365 days",
)
def get_history_route(symbol: str) -> HistoryResponse:
    """
    Get the trailing one-year daily series for a currency pair.

    Args:
        symbol: Kibot forex symbol (e.g., 'EURUSD'), case-insensitive

    Returns:
        {"symbol": "EURUSD", "bars": [{"date": "2026-01-02", "open": ...}, ...]}
        404 when the upstream call failed or its body could not be parsed.
    """
    normalized = symbol.upper()
    series = get_daily_series(normalized)
    if series is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error_code": ERROR_HISTORY_UNAVAILABLE,
                "detail": GENERIC_HISTORY_ERROR.format(symbol=normalized),
            },
        )

    return HistoryResponse(
        symbol=series.name,
        bars=[
            BarResponse(
                date=bar.timestamp.date(),
                open=bar.open,
                high=bar.high,
                low=bar.low,
                close=bar.close,
                volume=bar.volume,
            )
            for bar in series
        ],
    )
