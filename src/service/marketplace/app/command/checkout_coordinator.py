from typing import Iterable

from opentelemetry import trace

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.domain.value_object.checkout_failure import (
    CheckoutFailure,
    CheckoutFailureReason,
)
from src.service.marketplace.domain.value_object.checkout_result import CheckoutResult


class CheckoutCoordinator:
    """
    Moves products from AVAILABLE to SOLD, one unit of work per call

    Per product:
    1. Read the product and check it exists, is not the buyer's own and is AVAILABLE
    2. Claim it with a conditional update (status = SOLD where status = AVAILABLE)
    3. Append a purchase with the price and seller taken from the claimed row
    4. Clear the product from the buyer's cart, then from every other cart

    Step 2 is the only place a product leaves AVAILABLE. When two buyers race,
    the database serializes the conditional update and the loser sees no row,
    which is reported as PRODUCT_UNAVAILABLE.

    A batch is all-or-nothing: any failure rolls the whole transaction back.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def purchase(self, *, buyer_id: int, product_ids: Iterable[int]) -> CheckoutResult:
        # Ascending id order keeps row lock order identical across concurrent batches
        ordered_ids = sorted(set(product_ids))

        with self.tracer.start_as_current_span(
            'checkout.purchase',
            attributes={'buyer.id': buyer_id, 'checkout.item_count': len(ordered_ids)},
        ):
            async with self.uow:
                result = CheckoutResult()
                for product_id in ordered_ids:
                    if result.failures:
                        # Keep reporting every bad id, but never write after a failure
                        outcome = await self._inspect(buyer_id=buyer_id, product_id=product_id)
                        if isinstance(outcome, CheckoutFailure):
                            result.failures.append(outcome)
                        continue

                    failure = await self._checkout_one(
                        buyer_id=buyer_id, product_id=product_id, result=result
                    )
                    if failure:
                        result.failures.append(failure)

                if result.failures:
                    await self.uow.rollback()
                    Logger.base.warning(
                        f'🚫 [CHECKOUT] Batch rejected for buyer {buyer_id}: '
                        f'{result.failure_messages}'
                    )
                    return CheckoutResult(failures=result.failures)

                await self.uow.commit()

        Logger.base.info(
            f'✅ [CHECKOUT] Buyer {buyer_id} bought products {[p.product_id for p in result.purchases]}'
        )
        return result

    @Logger.io
    async def buy_now(self, *, buyer_id: int, product_id: int) -> CheckoutResult:
        with self.tracer.start_as_current_span(
            'checkout.buy_now',
            attributes={'buyer.id': buyer_id, 'product.id': product_id},
        ):
            async with self.uow:
                result = CheckoutResult()
                failure = await self._checkout_one(
                    buyer_id=buyer_id, product_id=product_id, result=result
                )
                if failure:
                    await self.uow.rollback()
                    Logger.base.warning(f'🚫 [CHECKOUT] Buy-now rejected: {failure.message}')
                    return CheckoutResult(failures=[failure])

                await self.uow.commit()

        Logger.base.info(f'✅ [CHECKOUT] Buyer {buyer_id} bought product {product_id} (buy-now)')
        return result

    async def _inspect(self, *, buyer_id: int, product_id: int) -> ProductEntity | CheckoutFailure:
        product = await self.uow.product_command_repo.get_by_id(product_id=product_id)
        if product is None:
            return CheckoutFailure(product_id, CheckoutFailureReason.PRODUCT_NOT_FOUND)
        if product.is_owned_by(buyer_id):
            return CheckoutFailure(product_id, CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN)
        if not product.is_available:
            return CheckoutFailure(product_id, CheckoutFailureReason.PRODUCT_UNAVAILABLE)
        return product

    async def _checkout_one(
        self, *, buyer_id: int, product_id: int, result: CheckoutResult
    ) -> CheckoutFailure | None:
        with self.tracer.start_as_current_span(
            'checkout.item', attributes={'product.id': product_id}
        ):
            outcome = await self._inspect(buyer_id=buyer_id, product_id=product_id)
            if isinstance(outcome, CheckoutFailure):
                return outcome

            sold = await self.uow.product_command_repo.set_status_if_available(
                product_id=product_id, new_status=ProductStatus.SOLD
            )
            if sold is None:
                # Another checkout claimed it between the read and the update
                return CheckoutFailure(product_id, CheckoutFailureReason.PRODUCT_UNAVAILABLE)

            purchase = await self.uow.purchase_command_repo.append(
                buyer_id=buyer_id,
                seller_id=sold.owner_id,
                product_id=product_id,
                price=sold.price,
            )
            await self.uow.cart_command_repo.remove_entry(user_id=buyer_id, product_id=product_id)
            await self.uow.cart_command_repo.remove_entries_for_product(product_id=product_id)

            result.purchases.append(purchase)
            result.sold_products.append(sold)
            return None
