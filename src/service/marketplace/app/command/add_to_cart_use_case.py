from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.entity.product_entity import ProductEntity


class AddToCartUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def add(self, *, user_id: int, product_id: int) -> None:
        async with self.uow:
            ProductEntity.validate_collectable(
                await self.uow.product_command_repo.get_by_id(product_id=product_id),
                user_id=user_id,
                destination='cart',
            )
            # Sold since the read above
            if not await self.uow.cart_command_repo.add_entry(
                user_id=user_id, product_id=product_id
            ):
                raise NotFoundError('Product not found or unavailable')
            await self.uow.commit()
