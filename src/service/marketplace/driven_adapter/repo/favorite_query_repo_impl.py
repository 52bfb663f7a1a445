from decimal import Decimal
from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_favorite_query_repo import IFavoriteQueryRepo
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.driven_adapter.model.category_model import CategoryModel
from src.service.marketplace.driven_adapter.model.favorite_model import FavoriteModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel


class FavoriteQueryRepoImpl(IFavoriteQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_for_user(self, *, user_id: int) -> List[dict]:
        async with self.session_factory() as session:
            stmt = (
                select(
                    FavoriteModel.id,
                    FavoriteModel.product_id,
                    FavoriteModel.created_at,
                    ProductModel.title,
                    ProductModel.description,
                    ProductModel.price,
                    ProductModel.image_url,
                    ProductModel.status,
                    CategoryModel.name.label('category_name'),
                    UserModel.username.label('seller_name'),
                )
                .join(ProductModel, FavoriteModel.product_id == ProductModel.id)
                .outerjoin(CategoryModel, ProductModel.category_id == CategoryModel.id)
                .outerjoin(UserModel, ProductModel.owner_id == UserModel.id)
                .where(
                    FavoriteModel.user_id == user_id,
                    ProductModel.status == ProductStatus.AVAILABLE.value,
                )
                .order_by(FavoriteModel.created_at.desc(), FavoriteModel.id.desc())
            )
            rows = (await session.execute(stmt)).all()
            return [
                {
                    'id': row.id,
                    'product_id': row.product_id,
                    'title': row.title,
                    'description': row.description,
                    'price': Decimal(row.price),
                    'image_url': row.image_url,
                    'status': row.status,
                    'category_name': row.category_name,
                    'seller_name': row.seller_name,
                    'created_at': row.created_at,
                }
                for row in rows
            ]
