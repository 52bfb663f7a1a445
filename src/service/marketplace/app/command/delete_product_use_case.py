from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.entity.product_entity import ProductEntity


class DeleteProductUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def delete(self, *, user_id: int, product_id: int) -> None:
        async with self.uow:
            product = ProductEntity.validate_owned(
                await self.uow.product_command_repo.get_by_id(product_id=product_id),
                user_id=user_id,
            )
            # Sold products stay for the purchase history
            product.validate_deletable()
            if not await self.uow.product_command_repo.delete(product_id=product_id):
                # Sold since the read above
                raise ConflictError('Cannot delete a sold product')
            await self.uow.commit()

        Logger.base.info(f'🗑️  [PRODUCT] User {user_id} deleted product {product_id}')
