from sqlalchemy import update as sql_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        user_model = UserModel(
            username=user_entity.username,
            email=user_entity.email,
            hashed_password=user_entity.hashed_password,
            full_name=user_entity.full_name,
            phone=user_entity.phone,
            address=user_entity.address,
            profile_image_url=user_entity.profile_image_url,
        )
        self.session.add(user_model)
        try:
            await self.session.flush()
        except IntegrityError:
            raise DomainError('Username or email already exists') from None
        await self.session.refresh(user_model)
        return self._model_to_entity(user_model)

    @Logger.io
    async def update_profile(self, *, user_entity: UserEntity) -> UserEntity:
        stmt = (
            sql_update(UserModel)
            .where(UserModel.id == user_entity.id)
            .values(
                full_name=user_entity.full_name,
                phone=user_entity.phone,
                address=user_entity.address,
                profile_image_url=user_entity.profile_image_url,
            )
            .returning(UserModel)
        )
        result = await self.session.execute(stmt)
        return self._model_to_entity(result.scalar_one())

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
