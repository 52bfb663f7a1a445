from typing import Any, AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.dto.product_list_query import ProductListQuery, ProductSort
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.driven_adapter.model.category_model import CategoryModel
from src.service.marketplace.driven_adapter.model.favorite_model import FavoriteModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.product_view_model import ProductViewModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel
from src.service.marketplace.driven_adapter.repo.product_command_repo_impl import (
    PRODUCT_COLUMNS,
    product_row_to_entity,
)


_SORT_ORDER = {
    ProductSort.NEWEST: (ProductModel.created_at.desc(), ProductModel.id.desc()),
    ProductSort.OLDEST: (ProductModel.created_at.asc(), ProductModel.id.asc()),
    ProductSort.PRICE_LOW: (ProductModel.price.asc(), ProductModel.id.asc()),
    ProductSort.PRICE_HIGH: (ProductModel.price.desc(), ProductModel.id.desc()),
}


def _apply_filters(stmt: Select[Any], query: ProductListQuery) -> Select[Any]:
    stmt = stmt.where(ProductModel.status == ProductStatus.AVAILABLE.value)
    if query.category_id is not None:
        stmt = stmt.where(ProductModel.category_id == query.category_id)
    if query.search and query.search.strip():
        pattern = f'%{query.search.strip()}%'
        stmt = stmt.where(
            or_(ProductModel.title.ilike(pattern), ProductModel.description.ilike(pattern))
        )
    if query.user_id is not None:
        stmt = stmt.where(ProductModel.owner_id == query.user_id)
    if query.min_price is not None:
        stmt = stmt.where(ProductModel.price >= query.min_price)
    if query.max_price is not None:
        stmt = stmt.where(ProductModel.price <= query.max_price)
    return stmt


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_available(self, *, query: ProductListQuery) -> tuple[List[dict], int]:
        async with self.session_factory() as session:
            count_stmt = _apply_filters(select(func.count(ProductModel.id)), query)
            total = (await session.execute(count_stmt)).scalar_one()

            list_stmt = (
                _apply_filters(self._detail_select(), query)
                .order_by(*_SORT_ORDER[query.sort])
                .limit(query.limit)
                .offset(query.offset)
            )
            rows = (await session.execute(list_stmt)).all()

            return [self._row_to_dict(row) for row in rows], total

    @Logger.io
    async def get_by_id_with_details(self, *, product_id: int) -> Optional[dict]:
        async with self.session_factory() as session:
            stmt = self._detail_select().where(ProductModel.id == product_id)
            row = (await session.execute(stmt)).one_or_none()
            return self._row_to_dict(row) if row else None

    @Logger.io
    async def get_owned(self, *, product_id: int, owner_id: int) -> Optional[ProductEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(*PRODUCT_COLUMNS).where(
                    ProductModel.id == product_id,
                    ProductModel.owner_id == owner_id,
                )
            )
            row = result.one_or_none()
            return product_row_to_entity(row) if row else None

    @Logger.io
    async def count_views(self, *, product_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(ProductViewModel.id)).where(
                    ProductViewModel.product_id == product_id
                )
            )
            return result.scalar_one()

    @Logger.io
    async def count_favorites(self, *, product_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(FavoriteModel.id)).where(FavoriteModel.product_id == product_id)
            )
            return result.scalar_one()

    @staticmethod
    def _detail_select() -> Select[Any]:
        return (
            select(
                *PRODUCT_COLUMNS,
                CategoryModel.name.label('category_name'),
                UserModel.username.label('seller_name'),
                UserModel.phone.label('seller_phone'),
            )
            .outerjoin(CategoryModel, ProductModel.category_id == CategoryModel.id)
            .outerjoin(UserModel, ProductModel.owner_id == UserModel.id)
        )

    @staticmethod
    def _row_to_dict(row: Row[Any]) -> dict:
        product = product_row_to_entity(row)
        return {
            'id': product.id,
            'owner_id': product.owner_id,
            'title': product.title,
            'description': product.description,
            'price': product.price,
            'category_id': product.category_id,
            'category_name': row.category_name,
            'image_url': product.image_url,
            'condition': product.condition,
            'status': product.status,
            'seller_name': row.seller_name,
            'seller_phone': row.seller_phone or '',
            'created_at': product.created_at,
            'updated_at': product.updated_at,
        }
