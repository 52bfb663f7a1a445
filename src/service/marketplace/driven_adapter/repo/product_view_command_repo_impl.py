from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_product_view_command_repo import (
    IProductViewCommandRepo,
)
from src.service.marketplace.domain.entity.product_view_entity import ProductViewEntity
from src.service.marketplace.driven_adapter.model.product_view_model import ProductViewModel


class ProductViewCommandRepoImpl(IProductViewCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def record(self, *, view: ProductViewEntity) -> ProductViewEntity:
        view_model = ProductViewModel(
            product_id=view.product_id,
            user_id=view.user_id,
            ip_address=view.ip_address,
        )
        self.session.add(view_model)
        await self.session.flush()
        await self.session.refresh(view_model)
        return ProductViewEntity(
            id=view_model.id,
            product_id=view_model.product_id,
            user_id=view_model.user_id,
            ip_address=view_model.ip_address,
            viewed_at=view_model.viewed_at,
        )
