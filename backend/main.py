"""
Forex Guru — FastAPI 應用程式進入點。
負責建立 App、註冊路由、管理生命週期。
業務邏輯位於 application/ 各 service。
"""

import os
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.dependencies import require_api_key
from api.rate_limit import limiter
from api.routes.history_routes import router as history_router
from api.routes.oauth_client_routes import router as oauth_client_router
from api.routes.price_routes import router as price_router
from api.schemas import HealthResponse
from config.settings import init_settings
from infrastructure.database import create_db_and_tables
from logging_config import get_logger, request_id_var

# Load environment variables from .env file
load_dotenv()
init_settings()

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: 啟動時建立資料表
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Forex Guru 後端啟動中 — 初始化資料庫...")
    create_db_and_tables()
    logger.info("資料庫初始化完成，服務就緒。")
    yield
    logger.info("Forex Guru 後端關閉中...")


# ---------------------------------------------------------------------------
# App Factory
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Forex Guru API",
    description="Forex Guru — 外匯報價、歷史日線與 OAuth client 管理",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGIN", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["X-API-Key", "X-Request-ID", "Content-Type"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """為每個請求設定 request_id（沿用 X-Request-ID，否則產生新的）。"""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse, summary="Health check")
def health_check() -> dict:
    """Health check endpoint - NO auth."""
    return {"status": "ok", "service": "forex-guru-backend"}


# ---------------------------------------------------------------------------
# 註冊路由（health 不在 router 內，免驗證）
# ---------------------------------------------------------------------------

auth_deps = [Depends(require_api_key)]

app.include_router(price_router, dependencies=auth_deps)
app.include_router(history_router, dependencies=auth_deps)
app.include_router(oauth_client_router, dependencies=auth_deps)


# ---------------------------------------------------------------------------
# Entry point（`forex-guru` console script / `python main.py`）
# ---------------------------------------------------------------------------


def run() -> None:
    """以 uvicorn 啟動服務（HOST / PORT 環境變數可覆寫）。"""
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,  # 沿用 logging_config 的 root handlers
    )


if __name__ == "__main__":
    run()
