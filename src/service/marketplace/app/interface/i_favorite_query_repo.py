from abc import ABC, abstractmethod
from typing import List


class IFavoriteQueryRepo(ABC):
    @abstractmethod
    async def list_for_user(self, *, user_id: int) -> List[dict]:
        pass
