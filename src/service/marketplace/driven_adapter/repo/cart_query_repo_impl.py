from decimal import Decimal
from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_cart_query_repo import ICartQueryRepo
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.driven_adapter.model.cart_entry_model import CartEntryModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel


class CartQueryRepoImpl(ICartQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_for_user(self, *, user_id: int) -> List[dict]:
        async with self.session_factory() as session:
            stmt = (
                select(
                    CartEntryModel.id,
                    CartEntryModel.product_id,
                    CartEntryModel.added_at,
                    ProductModel.title,
                    ProductModel.price,
                    ProductModel.image_url,
                    ProductModel.status,
                    UserModel.username.label('seller_name'),
                )
                .join(ProductModel, CartEntryModel.product_id == ProductModel.id)
                .join(UserModel, ProductModel.owner_id == UserModel.id)
                .where(
                    CartEntryModel.user_id == user_id,
                    ProductModel.status == ProductStatus.AVAILABLE.value,
                )
                .order_by(CartEntryModel.added_at.desc(), CartEntryModel.id.desc())
            )
            rows = (await session.execute(stmt)).all()
            return [
                {
                    'id': row.id,
                    'product_id': row.product_id,
                    'title': row.title,
                    'price': Decimal(row.price),
                    'image_url': row.image_url,
                    'status': row.status,
                    'seller_name': row.seller_name,
                    'added_at': row.added_at,
                }
                for row in rows
            ]
