from abc import ABC, abstractmethod
from decimal import Decimal

from src.service.marketplace.domain.entity.purchase_entity import PurchaseEntity


class IPurchaseCommandRepo(ABC):
    """Append-only purchase ledger"""

    @abstractmethod
    async def append(
        self, *, buyer_id: int, seller_id: int, product_id: int, price: Decimal
    ) -> PurchaseEntity:
        pass
