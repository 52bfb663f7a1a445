from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_cart_query_repo import ICartQueryRepo


class ListCartUseCase:
    def __init__(self, *, cart_query_repo: ICartQueryRepo) -> None:
        self.cart_query_repo = cart_query_repo

    @classmethod
    @inject
    def depends(
        cls, cart_query_repo: ICartQueryRepo = Depends(Provide[Container.cart_query_repo])
    ) -> Self:
        return cls(cart_query_repo=cart_query_repo)

    @Logger.io
    async def list_cart(self, *, user_id: int) -> List[dict]:
        return await self.cart_query_repo.list_for_user(user_id=user_id)
