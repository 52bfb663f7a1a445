from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.marketplace.app.dto.product_list_query import ProductListQuery
from src.service.marketplace.domain.entity.product_entity import ProductEntity


class IProductQueryRepo(ABC):
    """Repository interface for catalog read operations"""

    @abstractmethod
    async def list_available(self, *, query: ProductListQuery) -> tuple[List[dict], int]:
        """
        Returns:
            (one page of products with category and seller names, total matching count)
        """
        pass

    @abstractmethod
    async def get_by_id_with_details(self, *, product_id: int) -> Optional[dict]:
        """Product with category name, seller name and seller phone"""
        pass

    @abstractmethod
    async def get_owned(self, *, product_id: int, owner_id: int) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def count_views(self, *, product_id: int) -> int:
        pass

    @abstractmethod
    async def count_favorites(self, *, product_id: int) -> int:
        pass
