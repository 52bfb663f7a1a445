from sqlalchemy import delete as sql_delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import upsert_insert
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_favorite_command_repo import IFavoriteCommandRepo
from src.service.marketplace.driven_adapter.model.favorite_model import FavoriteModel


class FavoriteCommandRepoImpl(IFavoriteCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def add(self, *, user_id: int, product_id: int) -> bool:
        # Unique (user_id, product_id) decides, so concurrent duplicates cannot both insert
        result = await self.session.execute(
            upsert_insert(FavoriteModel)
            .values(user_id=user_id, product_id=product_id)
            .on_conflict_do_nothing()
        )
        return bool(result.rowcount)  # type: ignore[attr-defined]

    @Logger.io
    async def remove(self, *, user_id: int, product_id: int) -> None:
        await self.session.execute(
            sql_delete(FavoriteModel)
            .where(
                FavoriteModel.user_id == user_id,
                FavoriteModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
