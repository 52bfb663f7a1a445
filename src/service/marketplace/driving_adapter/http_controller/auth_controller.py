from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.register_user_use_case import RegisterUserUseCase
from src.service.marketplace.app.query.login_user_use_case import LoginUserUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.marketplace.driving_adapter.http_controller.schema.user_schema import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)


router = APIRouter()


def to_user_response(user: UserEntity) -> UserResponse:
    return UserResponse(
        id=user.id or 0,
        username=user.username,
        email=user.email,
        full_name=user.full_name or '',
        phone=user.phone or '',
        address=user.address or '',
        profile_image_url=user.profile_image_url or '',
        created_at=user.created_at,
    )


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_HOURS * 60 * 60,
        httponly=True,
        samesite='lax',
        secure=False,  # Set to True in production
    )


@router.post('/register', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register(
    response: Response,
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user = await use_case.register(
        username=request.username,
        email=request.email,
        password=request.password.get_secret_value(),
        full_name=request.full_name,
    )
    token = jwt_auth.create_jwt_token(user)
    _set_auth_cookie(response, token)
    return AuthResponse(
        message='User registered successfully', token=token, user=to_user_response(user)
    )


@router.post('/login', response_model=AuthResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    use_case: LoginUserUseCase = Depends(LoginUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user = await use_case.login(email=request.email, password=request.password.get_secret_value())
    token = jwt_auth.create_jwt_token(user)
    _set_auth_cookie(response, token)
    return AuthResponse(message='Login successful', token=token, user=to_user_response(user))
