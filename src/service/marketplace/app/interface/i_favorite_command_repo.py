from abc import ABC, abstractmethod


class IFavoriteCommandRepo(ABC):
    @abstractmethod
    async def add(self, *, user_id: int, product_id: int) -> bool:
        """Returns False when the product is already a favorite"""
        pass

    @abstractmethod
    async def remove(self, *, user_id: int, product_id: int) -> None:
        pass
