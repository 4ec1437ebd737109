"""
Infrastructure — Kibot 歷史資料 API 適配器。
一次阻塞式 GET，回傳 CSV 原文；失敗時記錄 log 並回傳 None，不向上拋出例外。
"""

import os
from datetime import datetime

import requests

from domain import constants
from logging_config import get_logger

logger = get_logger(__name__)


def format_kibot_date(moment: datetime) -> str:
    """Kibot 日期格式：MM/DD/YYYY。"""
    return moment.strftime(constants.KIBOT_DATE_FORMAT)


def build_history_params(symbol: str, start: datetime, end: datetime) -> dict[str, str]:
    """組出 Kibot history 查詢參數（順序與 API 文件一致）。"""
    return {
        "action": "history",
        "user": os.getenv("KIBOT_USER", constants.KIBOT_GUEST_USER),
        "password": os.getenv("KIBOT_PASSWORD", constants.KIBOT_GUEST_PASSWORD),
        "type": constants.KIBOT_ASSET_TYPE,
        "symbol": symbol,
        "interval": constants.KIBOT_DAILY_INTERVAL,
        "startdate": format_kibot_date(start),
        "enddate": format_kibot_date(end),
    }


def fetch_history_csv(symbol: str, start: datetime, end: datetime) -> str | None:
    """
    取得 symbol 在 [start, end] 期間的每日 OHLCV CSV。
    4xx 視為請求錯誤、其餘網路錯誤視為上游無法連線，兩者皆回傳 None。
    """
    params = build_history_params(symbol, start, end)

    try:
        resp = requests.get(
            constants.KIBOT_API_URL,
            params=params,
            timeout=constants.KIBOT_REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        if status is not None and 400 <= status < 500:
            logger.error("bad external api request (symbol=%s, status=%s)", symbol, status)
        else:
            logger.error("Kibot 上游錯誤 (symbol=%s, status=%s)：%s", symbol, status, e)
        return None
    except requests.RequestException as e:
        logger.error("Kibot 連線失敗 (symbol=%s)：%s", symbol, e)
        return None

    return resp.text
