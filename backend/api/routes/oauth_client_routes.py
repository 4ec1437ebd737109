"""
API — OAuth Client 管理路由。
薄控制器：僅負責解析請求、呼叫 Service、回傳回應。
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from api.schemas import (
    MessageResponse,
    OAuthClientCreateRequest,
    OAuthClientResponse,
    OAuthClientUpdateRequest,
)
from application.oauth_client_service import (
    ClientAlreadyExistsError,
    ClientNotFoundError,
    get_client,
    register_client,
    remove_client,
    update_client_details,
)
from domain.constants import ERROR_CLIENT_ALREADY_EXISTS, ERROR_CLIENT_NOT_FOUND
from infrastructure.database import get_session

router = APIRouter(prefix="/oauth/clients", tags=["OAuth Clients"])


def _not_found(e: ClientNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={"error_code": ERROR_CLIENT_NOT_FOUND, "detail": str(e)},
    )


@router.post(
    "",
    response_model=OAuthClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an OAuth client",
)
def create_client_route(
    payload: OAuthClientCreateRequest,
    session: Session = Depends(get_session),
) -> OAuthClientResponse:
    """新增 OAuth client。"""
    try:
        client = register_client(
            session,
            payload.client_id,
            payload.client_secret,
            payload.scope,
            payload.authorized_grant_types,
        )
    except ClientAlreadyExistsError as e:
        raise HTTPException(
            status_code=409,
            detail={"error_code": ERROR_CLIENT_ALREADY_EXISTS, "detail": str(e)},
        )
    return OAuthClientResponse(**client.model_dump(exclude={"client_secret"}))


@router.get(
    "/{client_id}",
    response_model=OAuthClientResponse,
    summary="Get an OAuth client",
)
def get_client_route(
    client_id: str,
    session: Session = Depends(get_session),
) -> OAuthClientResponse:
    """查詢單一 OAuth client。"""
    try:
        client = get_client(session, client_id)
    except ClientNotFoundError as e:
        raise _not_found(e)
    return OAuthClientResponse(**client.model_dump(exclude={"client_secret"}))


@router.put(
    "/{client_id}",
    response_model=OAuthClientResponse,
    summary="Replace an OAuth client's secret, scope and grant types",
)
def update_client_route(
    client_id: str,
    payload: OAuthClientUpdateRequest,
    session: Session = Depends(get_session),
) -> OAuthClientResponse:
    """整筆覆寫 OAuth client。"""
    try:
        client = update_client_details(
            session,
            client_id,
            payload.client_secret,
            payload.scope,
            payload.authorized_grant_types,
        )
    except ClientNotFoundError as e:
        raise _not_found(e)
    return OAuthClientResponse(**client.model_dump(exclude={"client_secret"}))


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete an OAuth client",
)
def delete_client_route(
    client_id: str,
    session: Session = Depends(get_session),
) -> dict:
    """刪除 OAuth client。"""
    try:
        return remove_client(session, client_id)
    except ClientNotFoundError as e:
        raise _not_found(e)
