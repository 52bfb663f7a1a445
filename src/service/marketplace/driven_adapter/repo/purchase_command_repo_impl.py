from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_purchase_command_repo import IPurchaseCommandRepo
from src.service.marketplace.domain.entity.purchase_entity import PurchaseEntity
from src.service.marketplace.driven_adapter.model.purchase_model import PurchaseModel


class PurchaseCommandRepoImpl(IPurchaseCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def append(
        self, *, buyer_id: int, seller_id: int, product_id: int, price: Decimal
    ) -> PurchaseEntity:
        purchase_model = PurchaseModel(
            buyer_id=buyer_id,
            seller_id=seller_id,
            product_id=product_id,
            price=price,
        )
        self.session.add(purchase_model)
        await self.session.flush()
        await self.session.refresh(purchase_model)
        return self._model_to_entity(purchase_model)

    def _model_to_entity(self, purchase_model: PurchaseModel) -> PurchaseEntity:
        return PurchaseEntity(
            id=purchase_model.id,
            buyer_id=purchase_model.buyer_id,
            seller_id=purchase_model.seller_id,
            product_id=purchase_model.product_id,
            price=Decimal(purchase_model.price),
            purchase_date=purchase_model.purchase_date,
        )
