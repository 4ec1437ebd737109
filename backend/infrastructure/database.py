"""
Infrastructure — 資料庫連線與 Session 管理。
預設使用 SQLite (透過 SQLModel / SQLAlchemy)，可由 DATABASE_URL 切換。
"""

import os
from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from domain.constants import DATA_DIR
from logging_config import get_logger

logger = get_logger(__name__)

DATABASE_URL = os.getenv(
    "DATABASE_URL", f"sqlite:///{os.path.join(DATA_DIR, 'forex_guru.db')}"
)

# SQLite 需要 check_same_thread=False 以支援 FastAPI 執行緒池存取
connect_args = (
    {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)

logger.info("資料庫連線位置：%s", engine.url.render_as_string(hide_password=True))


def create_db_and_tables() -> None:
    """建立所有 SQLModel 定義的資料表（若不存在）。"""
    # 確保 Entity 已被 import，SQLModel metadata 才會完整
    import domain.entities  # noqa: F401

    if DATABASE_URL.startswith("sqlite:///"):
        db_dir = os.path.dirname(DATABASE_URL.removeprefix("sqlite:///"))
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    logger.info("建立資料表（若不存在）...")
    SQLModel.metadata.create_all(engine)
    logger.info("資料表就緒。")


def get_session() -> Generator[Session, None, None]:
    """FastAPI Dependency：提供一個 DB Session，結束後自動關閉。"""
    with Session(engine) as session:
        yield session
