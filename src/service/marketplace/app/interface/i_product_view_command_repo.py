from abc import ABC, abstractmethod

from src.service.marketplace.domain.entity.product_view_entity import ProductViewEntity


class IProductViewCommandRepo(ABC):
    @abstractmethod
    async def record(self, *, view: ProductViewEntity) -> ProductViewEntity:
        pass
