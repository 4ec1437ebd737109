"""
Infrastructure — Repository Pattern。
OAuth client details 的資料存取：每個操作恰好一條參數化 SQL 語句，
不做驗證、不做唯一性預檢、不做批次處理。資料庫錯誤直接向上拋出。
"""

from sqlalchemy import delete, insert, update
from sqlmodel import Session, select

from domain.entities import OAuthClient

_clients = OAuthClient.__table__

# ===========================================================================
# OAuth Client Repository
# ===========================================================================


def _column_values(client: OAuthClient) -> dict:
    return {
        "client_id": client.client_id,
        "client_secret": client.client_secret,
        "scope": client.scope,
        "authorized_grant_types": client.authorized_grant_types,
    }


def insert_client(session: Session, client: OAuthClient) -> bool:
    """INSERT 一筆 client（重複 client_id 時由資料表拋出 IntegrityError）。"""
    session.exec(insert(_clients).values(**_column_values(client)))  # type: ignore[call-overload]
    session.commit()
    return True


def find_client(session: Session, client_id: str) -> OAuthClient | None:
    """根據 client_id 查詢單一 client。"""
    statement = select(OAuthClient).where(OAuthClient.client_id == client_id)
    return session.exec(statement).first()


def update_client(session: Session, client: OAuthClient) -> bool:
    """以 client_id 為條件覆寫全部欄位；回傳是否有資料列被更新。"""
    statement = (
        update(_clients)
        .where(_clients.c.client_id == client.client_id)
        .values(**_column_values(client))
    )
    result = session.exec(statement)  # type: ignore[call-overload]
    session.commit()
    return result.rowcount > 0


def delete_client(session: Session, client_id: str) -> bool:
    """根據 client_id 刪除 client；回傳是否有資料列被刪除。"""
    statement = delete(_clients).where(_clients.c.client_id == client_id)
    result = session.exec(statement)  # type: ignore[call-overload]
    session.commit()
    return result.rowcount > 0
