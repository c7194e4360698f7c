"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.auth import create_access_token
from core.config import Settings
from schemas.user import AccessTokenResponse, AuthCredentials
from services import user_service
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/signup",
    response_model=AccessTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Register a new account and return an access token for it."""
    try:
        user = await user_service.signup(db, data)
    except CredentialsTakenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return AccessTokenResponse(access_token=create_access_token(user, settings))


@router.post("/signin", response_model=AccessTokenResponse)
async def signin(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> AccessTokenResponse:
    """Exchange email and password for an access token."""
    try:
        user = await user_service.signin(db, data)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return AccessTokenResponse(access_token=create_access_token(user, settings))
