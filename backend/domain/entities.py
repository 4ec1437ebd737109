"""
Domain — 資料庫實體 (SQLModel Tables)。
定義 OAuth client-credential 授權所需的資料表。
"""

from sqlmodel import Field, SQLModel


class OAuthClient(SQLModel, table=True):
    """OAuth client details（client-credential 授權用的憑證與範圍）。"""

    __tablename__ = "oauth_client_details"

    client_id: str = Field(primary_key=True, description="Client 識別碼（唯一）")
    client_secret: str | None = Field(default=None, description="Client 密鑰")
    scope: str | None = Field(default=None, description="授權範圍（逗號分隔）")
    authorized_grant_types: str | None = Field(
        default=None, description="允許的 grant types（逗號分隔）"
    )
