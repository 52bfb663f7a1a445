import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.marketplace_metrics import metrics
from src.service.marketplace.app.command.checkout_coordinator import CheckoutCoordinator
from src.service.marketplace.domain.enum.payment_method import PaymentMethod
from src.service.marketplace.domain.value_object.checkout_result import CheckoutResult


class BuyNowUseCase:
    """Single product checkout, payment method is recorded as a label only"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.coordinator = CheckoutCoordinator(uow=uow)

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def buy_now(
        self, *, buyer_id: int, product_id: int, payment_method: PaymentMethod
    ) -> CheckoutResult:
        started = time.perf_counter()
        result = await self.coordinator.buy_now(buyer_id=buyer_id, product_id=product_id)

        metrics.record_checkout(
            operation='buy_now',
            result='success' if result.succeeded else 'rejected',
            duration=time.perf_counter() - started,
            sold=len(result.purchases),
        )
        for failure in result.failures:
            metrics.record_checkout_failure(operation='buy_now', reason=failure.reason)

        if result.succeeded:
            Logger.base.info(
                f'💳 [BUY-NOW] Purchase {result.purchases[0].id} paid with {payment_method}'
            )
        return result
