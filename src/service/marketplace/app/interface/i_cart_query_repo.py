from abc import ABC, abstractmethod
from typing import List


class ICartQueryRepo(ABC):
    @abstractmethod
    async def list_for_user(self, *, user_id: int) -> List[dict]:
        """Cart rows for available products only, newest first"""
        pass
