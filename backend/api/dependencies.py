"""
API — 存取控制 Dependencies。
報價、歷史資料與 OAuth client 管理路由共用同一把 API key；/health 不套用。
"""

import hmac
import os
from typing import Annotated

from fastapi import Header, HTTPException, status


def require_api_key(
    x_api_key: Annotated[str | None, Header()] = None,
) -> None:
    """
    比對 X-API-Key 與 FOREX_GURU_API_KEY，保護 /prices、/history 與 /oauth/clients。

    FOREX_GURU_API_KEY 未設定時視為本機開發模式，不做驗證。
    OAuth client 的 secret 只由此 key 保護的管理路由寫入，因此一律以
    constant-time 比對。

    Raises:
        HTTPException: 401，缺少 header 或 key 不符（僅在已設定 key 時）
    """
    expected_key = os.getenv("FOREX_GURU_API_KEY")
    if not expected_key:
        return

    if not x_api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-API-Key header",
        )

    if not hmac.compare_digest(x_api_key.encode(), expected_key.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
