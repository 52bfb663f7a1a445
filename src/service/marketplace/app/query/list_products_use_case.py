import math
from decimal import Decimal
from typing import Any, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.dto.product_list_query import ProductListQuery, ProductSort
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo


class ListProductsUseCase:
    """Browse available products with filters, sorting and page-based pagination"""

    def __init__(self, *, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io(truncate_content=True)
    async def list_products(
        self,
        *,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        user_id: Optional[int] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        sort: ProductSort = ProductSort.NEWEST,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> dict[str, Any]:
        page = max(page, 1)
        limit = min(max(limit or settings.DEFAULT_PAGE_SIZE, 1), settings.MAX_PAGE_SIZE)
        query = ProductListQuery(
            category_id=category_id,
            search=search,
            user_id=user_id,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
            page=page,
            limit=limit,
        )

        products, total = await self.product_query_repo.list_available(query=query)

        return {
            'products': products,
            'pagination': {
                'current_page': page,
                'total_pages': math.ceil(total / limit),
                'total_items': total,
                'items_per_page': limit,
            },
        }
