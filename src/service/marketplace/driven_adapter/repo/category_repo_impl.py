from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_category_repo import ICategoryRepo
from src.service.marketplace.domain.entity.category_entity import (
    DEFAULT_CATEGORY_NAMES,
    CategoryEntity,
)
from src.service.marketplace.driven_adapter.model.category_model import CategoryModel


class CategoryRepoImpl(ICategoryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_all(self) -> List[CategoryEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(CategoryModel).order_by(CategoryModel.name))
            return [
                CategoryEntity(id=model.id, name=model.name, created_at=model.created_at)
                for model in result.scalars().all()
            ]

    @Logger.io
    async def ensure_defaults(self) -> int:
        async with self.session_factory() as session:
            existing = set((await session.execute(select(CategoryModel.name))).scalars().all())
            missing = [name for name in DEFAULT_CATEGORY_NAMES if name not in existing]
            session.add_all(CategoryModel(name=name) for name in missing)
            await session.commit()
            return len(missing)

    @Logger.io
    async def exists(self, *, category_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CategoryModel.id).where(CategoryModel.id == category_id)
            )
            return result.scalar_one_or_none() is not None
