from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.uow = uow
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(uow=uow, user_query_repo=user_query_repo, password_hasher=password_hasher)

    @Logger.io
    async def register(
        self,
        *,
        username: str,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> UserEntity:
        user = UserEntity.register(
            username=username,
            email=email,
            plain_password=password,
            password_hasher=self.password_hasher,
            full_name=full_name,
        )

        if await self.user_query_repo.exists_by_username_or_email(
            username=user.username, email=user.email
        ):
            raise DomainError('Username or email already exists')

        async with self.uow:
            # The unique constraints still guard a concurrent registration
            created = await self.uow.user_command_repo.create(user_entity=user)
            await self.uow.commit()

        Logger.base.info(f'👤 [AUTH] Registered user {created.id} ({created.username})')
        return created
