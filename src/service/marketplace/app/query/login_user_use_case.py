from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity


class LoginUserUseCase:
    def __init__(
        self, *, user_query_repo: IUserQueryRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo, password_hasher=password_hasher)

    @Logger.io
    async def login(self, *, email: str, password: str) -> UserEntity:
        user = UserEntity.validate_user_exists(
            await self.user_query_repo.get_by_email(email=email)
        )
        if not self.password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=user.hashed_password
        ):
            raise AuthenticationError('Invalid credentials')
        return user
