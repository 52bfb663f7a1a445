from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_image_store import IImageStore
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.image_error import ImageDownloadError


class UpdateProfileUseCase:
    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        user_query_repo: IUserQueryRepo,
        image_store: IImageStore,
    ) -> None:
        self.uow = uow
        self.user_query_repo = user_query_repo
        self.image_store = image_store

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        image_store: IImageStore = Depends(Provide[Container.image_store]),
    ) -> Self:
        return cls(uow=uow, user_query_repo=user_query_repo, image_store=image_store)

    @Logger.io
    async def update_profile(
        self,
        *,
        user_id: int,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> UserEntity:
        user = await self.user_query_repo.get_by_id(user_id=user_id)
        if not user:
            raise NotFoundError('User not found')

        updated = user.update_profile(
            full_name=full_name,
            phone=phone,
            address=address,
            profile_image_url=profile_image_url,
        )
        async with self.uow:
            saved = await self.uow.user_command_repo.update_profile(user_entity=updated)
            await self.uow.commit()
        return saved

    @Logger.io
    async def update_profile_with_image_url(
        self,
        *,
        user_id: int,
        full_name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> UserEntity:
        """Same as update_profile, but the picture is copied into local storage first"""
        stored_url = None
        if profile_image_url and profile_image_url.strip():
            try:
                stored_url = await self.image_store.download(
                    url=profile_image_url.strip(), prefix='profile'
                )
            except ImageDownloadError as e:
                raise DomainError('Failed to download profile image from URL') from e

        return await self.update_profile(
            user_id=user_id,
            full_name=full_name,
            phone=phone,
            address=address,
            profile_image_url=stored_url,
        )
