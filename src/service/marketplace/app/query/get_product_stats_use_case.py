from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity


class GetProductStatsUseCase:
    """Seller analytics for one of the caller's own listings"""

    def __init__(self, *, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def get_stats(self, *, user_id: int, product_id: int) -> dict[str, Any]:
        product = ProductEntity.validate_owned(
            await self.product_query_repo.get_owned(product_id=product_id, owner_id=user_id),
            user_id=user_id,
        )
        return {
            'view_count': await self.product_query_repo.count_views(product_id=product_id),
            'favorites_count': await self.product_query_repo.count_favorites(
                product_id=product_id
            ),
            'created_at': product.created_at,
            'status': product.status,
        }
