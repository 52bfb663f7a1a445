from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


def extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """Bearer header wins over the auth cookie"""
    if authorization:
        scheme, _, credentials = authorization.partition(' ')
        if scheme.lower() == 'bearer' and credentials:
            return credentials.strip()
    return cookie_token


@inject
async def get_current_user(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """
    Get current user from JWT token (stateless, no DB query)
    """
    return jwt_auth.get_current_user_info_from_jwt(extract_token(authorization, cookie_token))


@inject
async def get_optional_user(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Optional[UserEntity]:
    """Anonymous callers and stale tokens both resolve to None"""
    token = extract_token(authorization, cookie_token)
    if not token:
        return None
    try:
        return jwt_auth.get_current_user_info_from_jwt(token)
    except AuthenticationError:
        return None
