from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import delete as sql_delete, func, select, update as sql_update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition, ProductStatus
from src.service.marketplace.driven_adapter.model.cart_entry_model import CartEntryModel
from src.service.marketplace.driven_adapter.model.favorite_model import FavoriteModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.product_view_model import ProductViewModel


PRODUCT_COLUMNS = (
    ProductModel.id,
    ProductModel.owner_id,
    ProductModel.title,
    ProductModel.description,
    ProductModel.price,
    ProductModel.category_id,
    ProductModel.image_url,
    ProductModel.condition,
    ProductModel.status,
    ProductModel.created_at,
    ProductModel.updated_at,
)


def product_row_to_entity(row: Row[Any] | ProductModel) -> ProductEntity:
    return ProductEntity(
        id=row.id,
        owner_id=row.owner_id,
        title=row.title,
        description=row.description or '',
        price=Decimal(row.price),
        category_id=row.category_id,
        image_url=row.image_url,
        condition=ProductCondition(row.condition),
        status=ProductStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class ProductCommandRepoImpl(IProductCommandRepo):
    """Catalog writes on the unit of work session (caller commits)"""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, product_id: int) -> Optional[ProductEntity]:
        result = await self.session.execute(
            select(*PRODUCT_COLUMNS).where(ProductModel.id == product_id)
        )
        row = result.one_or_none()
        return product_row_to_entity(row) if row else None

    @Logger.io
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        product_model = ProductModel(
            owner_id=product.owner_id,
            title=product.title,
            description=product.description,
            price=product.price,
            category_id=product.category_id,
            image_url=product.image_url,
            condition=product.condition.value,
            status=product.status.value,
        )
        self.session.add(product_model)
        await self.session.flush()
        await self.session.refresh(product_model)
        return product_row_to_entity(product_model)

    @Logger.io
    async def update(self, *, product: ProductEntity) -> ProductEntity:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(
                title=product.title,
                description=product.description,
                price=product.price,
                category_id=product.category_id,
                image_url=product.image_url,
                condition=product.condition.value,
                updated_at=func.now(),
            )
            .returning(*PRODUCT_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return product_row_to_entity(result.one())

    @Logger.io
    async def delete(self, *, product_id: int) -> bool:
        locked = await self.session.execute(
            select(ProductModel.id)
            .where(
                ProductModel.id == product_id,
                ProductModel.status == ProductStatus.AVAILABLE.value,
            )
            .with_for_update()
        )
        if locked.scalar_one_or_none() is None:
            return False

        for model in (CartEntryModel, FavoriteModel, ProductViewModel):
            await self.session.execute(
                sql_delete(model)
                .where(model.product_id == product_id)
                .execution_options(synchronize_session=False)
            )
        # Status re-checked at write time, a sale in between leaves rowcount 0
        result = await self.session.execute(
            sql_delete(ProductModel)
            .where(
                ProductModel.id == product_id,
                ProductModel.status == ProductStatus.AVAILABLE.value,
            )
            .execution_options(synchronize_session=False)
        )
        return bool(result.rowcount)  # type: ignore[attr-defined]

    @Logger.io
    async def set_status_if_available(
        self, *, product_id: int, new_status: ProductStatus
    ) -> Optional[ProductEntity]:
        # Check and set in one statement, the row lock serializes racing buyers
        stmt = (
            sql_update(ProductModel)
            .where(
                ProductModel.id == product_id,
                ProductModel.status == ProductStatus.AVAILABLE.value,
            )
            .values(status=new_status.value, updated_at=func.now())
            .returning(*PRODUCT_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return product_row_to_entity(row) if row else None
