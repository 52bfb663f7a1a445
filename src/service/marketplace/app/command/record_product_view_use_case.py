from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.entity.product_view_entity import ProductViewEntity


class RecordProductViewUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def record(
        self, *, product_id: int, user_id: Optional[int], ip_address: Optional[str]
    ) -> ProductViewEntity:
        async with self.uow:
            if not await self.uow.product_command_repo.get_by_id(product_id=product_id):
                raise NotFoundError('Product not found')
            view = await self.uow.product_view_command_repo.record(
                view=ProductViewEntity(
                    product_id=product_id, user_id=user_id, ip_address=ip_address
                )
            )
            await self.uow.commit()
        return view
