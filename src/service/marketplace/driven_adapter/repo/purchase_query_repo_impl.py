from decimal import Decimal
from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_purchase_query_repo import IPurchaseQueryRepo
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.purchase_model import PurchaseModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel


class PurchaseQueryRepoImpl(IPurchaseQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_for_buyer(self, *, buyer_id: int) -> List[dict]:
        async with self.session_factory() as session:
            stmt = (
                select(
                    PurchaseModel.id,
                    PurchaseModel.buyer_id,
                    PurchaseModel.seller_id,
                    PurchaseModel.product_id,
                    PurchaseModel.price,
                    PurchaseModel.purchase_date,
                    ProductModel.title,
                    ProductModel.description,
                    ProductModel.image_url,
                    UserModel.username.label('seller_name'),
                )
                .join(ProductModel, PurchaseModel.product_id == ProductModel.id)
                .join(UserModel, PurchaseModel.seller_id == UserModel.id)
                .where(PurchaseModel.buyer_id == buyer_id)
                .order_by(PurchaseModel.purchase_date.desc(), PurchaseModel.id.desc())
            )
            rows = (await session.execute(stmt)).all()
            return [
                {
                    'id': row.id,
                    'buyer_id': row.buyer_id,
                    'seller_id': row.seller_id,
                    'product_id': row.product_id,
                    'price': Decimal(row.price),
                    'purchase_date': row.purchase_date,
                    'title': row.title,
                    'description': row.description,
                    'image_url': row.image_url,
                    'seller_name': row.seller_name,
                }
                for row in rows
            ]
