"""
Application — Historical Data Service。
從 Kibot 取得最近 365 天的每日匯率，並將 CSV 轉為 TimeSeries。

失敗情境只有兩種，皆以 None 回傳給呼叫端（「無資料」）：
- 上游無法連線或拒絕請求（fetch 回傳 None）
- 回應內容無法解析
"""

import csv
import io
from datetime import UTC, datetime, timedelta
from decimal import Decimal, InvalidOperation

from domain.constants import HISTORY_LOOKBACK_SECONDS, KIBOT_DATE_FORMAT
from domain.timeseries import Bar, TimeSeries
from infrastructure.external.kibot import fetch_history_csv
from logging_config import get_logger

logger = get_logger(__name__)

_CSV_FIELD_COUNT = 6  # date,open,high,low,close,volume


def get_daily_series(symbol: str, now: datetime | None = None) -> TimeSeries | None:
    """
    Gets a daily TimeSeries for the last 365 days.

    Args:
        symbol: the currency pair (e.g. "EURUSD")
        now: end of the range, defaults to the current UTC time

    Returns:
        A TimeSeries with every bar Kibot returned, or None when the upstream
        call failed or the body could not be parsed.
    """
    end = now or datetime.now(UTC)
    start = end - timedelta(seconds=HISTORY_LOOKBACK_SECONDS)

    rates = fetch_history_csv(symbol, start, end)
    return build_time_series(rates, symbol)


def _parse_bar(row: list[str]) -> Bar:
    if len(row) < _CSV_FIELD_COUNT:
        raise ValueError(f"expected {_CSV_FIELD_COUNT} fields, got {len(row)}")

    day = datetime.strptime(row[0].strip(), KIBOT_DATE_FORMAT).replace(tzinfo=UTC)
    open_, high, low, close, volume = (Decimal(v.strip()) for v in row[1:6])
    for value in (open_, high, low, close, volume):
        # Decimal() 接受 NaN / Infinity，但它們不是有效報價
        if not value.is_finite():
            raise ValueError(f"non-finite value: {value}")
    return Bar(
        timestamp=day,
        open=open_,
        high=high,
        low=low,
        close=close,
        volume=volume,
    )


def build_time_series(rates: str | None, symbol: str) -> TimeSeries | None:
    """
    Maps the Kibot CSV body to a TimeSeries, one Bar per line in file order.
    Returns None for a missing body or any malformed line.
    """
    if rates is None:
        logger.error("could not map response (symbol=%s, empty body)", symbol)
        return None

    series = TimeSeries(name=symbol)
    try:
        for row in csv.reader(io.StringIO(rates)):
            if not row or not "".join(row).strip():
                continue
            series.add_bar(_parse_bar(row))
    except (ValueError, InvalidOperation) as e:
        logger.error("could not map response (symbol=%s)：%s", symbol, e)
        return None

    logger.info("%s 歷史資料解析完成（%d 筆）", symbol, series.bar_count)
    return series
