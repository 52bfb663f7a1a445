from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email.strip().lower())
            )
            user_model = result.scalar_one_or_none()
            return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()
            return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def exists_by_username_or_email(self, *, username: str, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel.id)
                .where(
                    or_(
                        UserModel.username == username.strip(),
                        UserModel.email == email.strip().lower(),
                    )
                )
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            hashed_password=user_model.hashed_password,
            full_name=user_model.full_name,
            phone=user_model.phone,
            address=user_model.address,
            profile_image_url=user_model.profile_image_url,
            created_at=user_model.created_at,
        )
