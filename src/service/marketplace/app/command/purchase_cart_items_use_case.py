import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.command.checkout_coordinator import CheckoutCoordinator
from src.service.marketplace.domain.value_object.checkout_result import CheckoutResult


class PurchaseCartItemsUseCase:
    """
    Batch checkout of several products (usually the buyer's cart)

    All-or-nothing: the result either holds one purchase per distinct product
    id or the list of failures, in which case no product changed state.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.coordinator = CheckoutCoordinator(uow=uow)

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def purchase(self, *, buyer_id: int, product_ids: List[int]) -> CheckoutResult:
        if not product_ids:
            raise ValidationError('Product IDs array is required')

        started = time.perf_counter()
        result = await self.coordinator.purchase(buyer_id=buyer_id, product_ids=product_ids)

        metrics.record_checkout(
            operation='purchase',
            result='success' if result.succeeded else 'rejected',
            duration=time.perf_counter() - started,
            sold=len(result.purchases),
        )
        for failure in result.failures:
            metrics.record_checkout_failure(operation='purchase', reason=failure.reason)

        return result
