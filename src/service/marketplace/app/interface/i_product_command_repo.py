from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductStatus


class IProductCommandRepo(ABC):
    """
    Product catalog writes, bound to the unit of work session

    set_status_if_available is the only path that moves a product out of
    AVAILABLE. It is a single conditional update, so two concurrent
    checkouts of one product cannot both apply.
    """

    @abstractmethod
    async def get_by_id(self, *, product_id: int) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(self, *, product: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def delete(self, *, product_id: int) -> bool:
        """
        Delete an AVAILABLE product together with its cart, favorite and view rows

        Returns False, deleting nothing, when the product is missing or already sold
        """
        pass

    @abstractmethod
    async def set_status_if_available(
        self, *, product_id: int, new_status: ProductStatus
    ) -> Optional[ProductEntity]:
        """
        Atomically set the status when the product is still AVAILABLE

        Returns:
            The updated product, or None when no row matched (missing or already sold)
        """
        pass
