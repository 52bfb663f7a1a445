from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_category_repo import ICategoryRepo
from src.service.marketplace.domain.entity.category_entity import CategoryEntity


class ListCategoriesUseCase:
    def __init__(self, *, category_repo: ICategoryRepo) -> None:
        self.category_repo = category_repo

    @classmethod
    @inject
    def depends(
        cls, category_repo: ICategoryRepo = Depends(Provide[Container.category_repo])
    ) -> Self:
        return cls(category_repo=category_repo)

    @Logger.io
    async def list_categories(self) -> List[CategoryEntity]:
        return await self.category_repo.list_all()
