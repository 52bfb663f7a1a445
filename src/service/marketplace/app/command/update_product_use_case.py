from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_category_repo import ICategoryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition


class UpdateProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, category_repo: ICategoryRepo) -> None:
        self.uow = uow
        self.category_repo = category_repo

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        category_repo: ICategoryRepo = Depends(Provide[Container.category_repo]),
    ) -> Self:
        return cls(uow=uow, category_repo=category_repo)

    @Logger.io
    async def update(
        self,
        *,
        user_id: int,
        product_id: int,
        title: Optional[str],
        price: Any,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        condition: Optional[ProductCondition] = None,
    ) -> ProductEntity:
        if category_id is not None and not await self.category_repo.exists(
            category_id=category_id
        ):
            raise ValidationError('Invalid category')

        async with self.uow:
            product = ProductEntity.validate_owned(
                await self.uow.product_command_repo.get_by_id(product_id=product_id),
                user_id=user_id,
            )
            revised = product.revise(
                title=title,
                price=price,
                description=description,
                category_id=category_id,
                image_url=image_url,
                condition=condition,
            )
            saved = await self.uow.product_command_repo.update(product=revised)
            await self.uow.commit()
        return saved
