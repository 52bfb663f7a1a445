from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_favorite_query_repo import IFavoriteQueryRepo


class ListFavoritesUseCase:
    def __init__(self, *, favorite_query_repo: IFavoriteQueryRepo) -> None:
        self.favorite_query_repo = favorite_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        favorite_query_repo: IFavoriteQueryRepo = Depends(
            Provide[Container.favorite_query_repo]
        ),
    ) -> Self:
        return cls(favorite_query_repo=favorite_query_repo)

    @Logger.io
    async def list_favorites(self, *, user_id: int) -> List[dict]:
        return await self.favorite_query_repo.list_for_user(user_id=user_id)
