from abc import ABC, abstractmethod
from typing import List


class IPurchaseQueryRepo(ABC):
    @abstractmethod
    async def list_for_buyer(self, *, buyer_id: int) -> List[dict]:
        """Purchases with product title, description, image and seller name, newest first"""
        pass
