"""
Infrastructure — OANDA v20 Pricing API 適配器。
Token 與帳號於呼叫時從環境變數讀取（OANDA_API_TOKEN / OANDA_ACCOUNT_ID）。
不重試、不快取：任何失敗皆以 OandaApiError 拋出，由 application 層決定如何呈現。
"""

import os

import requests

from domain import constants
from logging_config import get_logger

logger = get_logger(__name__)


class OandaApiError(Exception):
    """OANDA 呼叫失敗（未設定、連線錯誤、非 2xx 或非 JSON 回應）。"""


def _get_credentials() -> tuple[str, str]:
    token = os.getenv("OANDA_API_TOKEN")
    account_id = os.getenv("OANDA_ACCOUNT_ID")
    if not token or not account_id:
        raise OandaApiError(
            "OANDA_API_TOKEN / OANDA_ACCOUNT_ID environment variables are not set"
        )
    return token, account_id


def _base_url() -> str:
    env = constants.OANDA_ENVIRONMENT
    try:
        return constants.OANDA_API_URLS[env]
    except KeyError:
        raise OandaApiError(f"Unknown OANDA environment: {env}") from None


def fetch_pricing(instruments: list[str]) -> dict:
    """
    取得指定貨幣對的即時報價，原樣回傳 OANDA 的 JSON body。

    Args:
        instruments: OANDA instrument 代號（例如 ["EUR_USD", "USD_JPY"]）。

    Raises:
        OandaApiError: 任何上游失敗。
    """
    token, account_id = _get_credentials()
    url = _base_url() + constants.OANDA_PRICING_PATH.format(account_id=account_id)

    try:
        resp = requests.get(
            url,
            headers={"Authorization": f"Bearer {token}"},
            params={"instruments": ",".join(instruments)},
            timeout=constants.OANDA_REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        payload = resp.json()
    except requests.HTTPError as e:
        logger.error(
            "OANDA pricing 回應錯誤 (status=%s)：%s",
            e.response.status_code if e.response is not None else "?",
            e,
        )
        raise OandaApiError(str(e)) from e
    except requests.RequestException as e:
        logger.error("OANDA pricing 連線失敗：%s", e)
        raise OandaApiError(str(e)) from e
    except ValueError as e:
        logger.error("OANDA pricing 回應非 JSON：%s", e)
        raise OandaApiError("OANDA returned a non-JSON body") from e

    logger.info("OANDA pricing 取得成功（%d 個 instrument）", len(instruments))
    return payload
