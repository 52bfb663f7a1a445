from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import upsert_insert
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_cart_command_repo import ICartCommandRepo
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.driven_adapter.model.cart_entry_model import CartEntryModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel


class CartCommandRepoImpl(ICartCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def add_entry(self, *, user_id: int, product_id: int) -> bool:
        # Row lock holds off a checkout until this entry is visible to its cart sweep
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

        await self.session.execute(
            upsert_insert(CartEntryModel)
            .values(user_id=user_id, product_id=product_id)
            .on_conflict_do_nothing()
        )
        return True

    @Logger.io
    async def remove_entry(self, *, user_id: int, product_id: int) -> None:
        await self.session.execute(
            sql_delete(CartEntryModel)
            .where(
                CartEntryModel.user_id == user_id,
                CartEntryModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )

    @Logger.io
    async def remove_entries_for_product(self, *, product_id: int) -> int:
        result = await self.session.execute(
            sql_delete(CartEntryModel)
            .where(CartEntryModel.product_id == product_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0  # type: ignore[attr-defined]
