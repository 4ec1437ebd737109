"""
Shared test fixtures — TestClient, in-memory SQLite, mocked external services.
"""

import os
import tempfile

# Set environment variables BEFORE any app imports
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "forex_guru_test_logs"))
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Generator  # noqa: E402
from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from api.rate_limit import limiter  # noqa: E402
from infrastructure.database import get_session  # noqa: E402
from main import app  # noqa: E402

# ---------------------------------------------------------------------------
# In-memory SQLite engine with StaticPool (shared single connection)
# ---------------------------------------------------------------------------

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def _override_get_session() -> Generator[Session, None, None]:
    with Session(test_engine) as session:
        yield session


# ---------------------------------------------------------------------------
# Mock external services — OANDA & Kibot
# ---------------------------------------------------------------------------

MOCK_PRICING = {
    "time": "2026-10-19T08:00:00.000000000Z",
    "prices": [
        {
            "instrument": "EUR_USD",
            "tradeable": True,
            "bids": [{"price": "1.08412", "liquidity": 1000000}],
            "asks": [{"price": "1.08425", "liquidity": 1000000}],
            "closeoutBid": "1.08412",
            "closeoutAsk": "1.08425",
        }
    ],
}

MOCK_KIBOT_CSV = (
    "10/20/2025,1.0821,1.0855,1.0803,1.0847,51234\n"
    "10/21/2025,1.0847,1.0869,1.0812,1.0830,48710\n"
    "10/22/2025,1.0830,1.0841,1.0790,1.0798,50102\n"
)

_PATCHES: list[tuple[str, object]] = [
    ("application.pricing_service.fetch_pricing", MOCK_PRICING),
    ("application.historical_data_service.fetch_history_csv", MOCK_KIBOT_CSV),
]


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    """Create all tables once for the test session."""
    import domain.entities  # noqa: F401 — register models with SQLModel

    SQLModel.metadata.create_all(test_engine)
    yield
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(autouse=True)
def _clean_tables():
    """Truncate all tables between tests for isolation."""
    yield
    with Session(test_engine) as session:
        for table in reversed(SQLModel.metadata.sorted_tables):
            session.exec(table.delete())  # type: ignore[arg-type]
        session.commit()


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    limiter.reset()
    yield


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """TestClient with overridden DB session and mocked external services."""
    app.dependency_overrides[get_session] = _override_get_session

    patchers = [patch(target, return_value=rv) for target, rv in _PATCHES]
    for p in patchers:
        p.start()

    with TestClient(app) as c:
        yield c

    for p in patchers:
        p.stop()

    app.dependency_overrides.clear()


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    """Standalone DB session fixture for repository / service unit tests."""
    with Session(test_engine) as session:
        yield session
        session.rollback()
