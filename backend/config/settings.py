"""
Config — 從環境變數覆寫 domain 常數。
在應用程式啟動時呼叫一次 init_settings()。
"""

import os

from domain import constants
from logging_config import get_logger

logger = get_logger(__name__)


def init_settings() -> None:
    """Override domain constants from environment. Call once at startup."""
    oanda_env = os.getenv("OANDA_ENVIRONMENT")
    if oanda_env:
        if oanda_env in constants.OANDA_API_URLS:
            constants.OANDA_ENVIRONMENT = oanda_env
        else:
            logger.warning(
                "OANDA_ENVIRONMENT=%s 無效（可用：%s），沿用 %s",
                oanda_env,
                ", ".join(constants.OANDA_API_URLS),
                constants.OANDA_ENVIRONMENT,
            )

    kibot_url = os.getenv("KIBOT_API_URL")
    if kibot_url:
        constants.KIBOT_API_URL = kibot_url
