"""
Application — OAuth Client Service。
薄服務層：呼叫 repository，將「找不到」與「重複 client_id」轉為領域例外。
"""

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from domain.entities import OAuthClient
from infrastructure import repositories as repo
from logging_config import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Custom exceptions
# ---------------------------------------------------------------------------


class ClientNotFoundError(Exception):
    """OAuth client 不存在。"""


class ClientAlreadyExistsError(Exception):
    """OAuth client_id 已存在。"""


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def register_client(
    session: Session,
    client_id: str,
    client_secret: str | None,
    scope: str | None,
    authorized_grant_types: str | None,
) -> OAuthClient:
    """新增 OAuth client。"""
    client = OAuthClient(
        client_id=client_id,
        client_secret=client_secret,
        scope=scope,
        authorized_grant_types=authorized_grant_types,
    )
    try:
        repo.insert_client(session, client)
    except IntegrityError as e:
        session.rollback()
        raise ClientAlreadyExistsError(f"OAuth client {client_id} 已存在") from e

    logger.info("已新增 OAuth client：%s", client_id)
    return client


def get_client(session: Session, client_id: str) -> OAuthClient:
    """查詢單一 OAuth client。"""
    client = repo.find_client(session, client_id)
    if client is None:
        raise ClientNotFoundError(f"找不到 OAuth client {client_id}")
    return client


def update_client_details(
    session: Session,
    client_id: str,
    client_secret: str | None,
    scope: str | None,
    authorized_grant_types: str | None,
) -> OAuthClient:
    """覆寫 OAuth client 的密鑰、範圍與 grant types。"""
    client = OAuthClient(
        client_id=client_id,
        client_secret=client_secret,
        scope=scope,
        authorized_grant_types=authorized_grant_types,
    )
    if not repo.update_client(session, client):
        raise ClientNotFoundError(f"找不到 OAuth client {client_id}")

    logger.info("已更新 OAuth client：%s", client_id)
    return client


def remove_client(session: Session, client_id: str) -> dict:
    """刪除 OAuth client。"""
    if not repo.delete_client(session, client_id):
        raise ClientNotFoundError(f"找不到 OAuth client {client_id}")

    logger.info("已刪除 OAuth client：%s", client_id)
    return {"message": f"OAuth client {client_id} 已刪除"}
