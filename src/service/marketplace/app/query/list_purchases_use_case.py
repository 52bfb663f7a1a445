from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_purchase_query_repo import IPurchaseQueryRepo


class ListPurchasesUseCase:
    def __init__(self, *, purchase_query_repo: IPurchaseQueryRepo) -> None:
        self.purchase_query_repo = purchase_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        purchase_query_repo: IPurchaseQueryRepo = Depends(
            Provide[Container.purchase_query_repo]
        ),
    ) -> Self:
        return cls(purchase_query_repo=purchase_query_repo)

    @Logger.io
    async def list_purchases(self, *, buyer_id: int) -> List[dict]:
        return await self.purchase_query_repo.list_for_buyer(buyer_id=buyer_id)
