"""
Application — Pricing Service：外匯報價透傳。
不重試、不降級；上游失敗轉為 PricingUnavailableError。
"""

from domain.constants import OANDA_DEFAULT_INSTRUMENTS
from infrastructure.external.oanda import OandaApiError, fetch_pricing
from logging_config import get_logger

logger = get_logger(__name__)


class PricingUnavailableError(Exception):
    """報價供應商無法回應。"""


def get_prices(instruments: list[str] | None = None) -> dict:
    """回傳 OANDA pricing 原始回應（未指定 instruments 時使用預設清單）。"""
    targets = instruments or OANDA_DEFAULT_INSTRUMENTS
    try:
        return fetch_pricing(targets)
    except OandaApiError as e:
        logger.warning("報價取得失敗（instruments=%s）：%s", ",".join(targets), e)
        raise PricingUnavailableError(str(e)) from e
