"""
API — Pydantic Request / Response Schemas。
僅用於 HTTP 層的資料驗證與序列化，不含業務邏輯。
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Common
# ---------------------------------------------------------------------------


class MessageResponse(BaseModel):
    """通用操作結果回應（刪除等）。"""

    message: str


class HealthResponse(BaseModel):
    """GET /health 回應。"""

    status: str
    service: str


# ---------------------------------------------------------------------------
# OAuth Clients
# ---------------------------------------------------------------------------


class OAuthClientCreateRequest(BaseModel):
    """POST /oauth/clients 請求 Body。"""

    client_id: str = Field(min_length=1, max_length=256)
    client_secret: str | None = None
    scope: str | None = None
    authorized_grant_types: str | None = None


class OAuthClientUpdateRequest(BaseModel):
    """PUT /oauth/clients/{client_id} 請求 Body（整筆覆寫）。"""

    client_secret: str | None = None
    scope: str | None = None
    authorized_grant_types: str | None = None


class OAuthClientResponse(BaseModel):
    """OAuth client 回應（不回傳 client_secret）。"""

    client_id: str
    scope: str | None = None
    authorized_grant_types: str | None = None


# ---------------------------------------------------------------------------
# Historical Data
# ---------------------------------------------------------------------------


class BarResponse(BaseModel):
    """單日 OHLCV。"""

    date: dt.date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal


class HistoryResponse(BaseModel):
    """GET /history/{symbol} 回應。"""

    symbol: str
    bars: list[BarResponse]
