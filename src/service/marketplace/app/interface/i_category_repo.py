from abc import ABC, abstractmethod
from typing import List

from src.service.marketplace.domain.entity.category_entity import CategoryEntity


class ICategoryRepo(ABC):
    @abstractmethod
    async def list_all(self) -> List[CategoryEntity]:
        """All categories ordered by name"""
        pass

    @abstractmethod
    async def ensure_defaults(self) -> int:
        """Insert missing default categories, returns how many were added"""
        pass

    @abstractmethod
    async def exists(self, *, category_id: int) -> bool:
        pass
