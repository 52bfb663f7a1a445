"""
Unit tests for CheckoutCoordinator

Runs the coordinator against the in-memory unit of work:
1. Single product checkout (buy-now) and its three rejection reasons
2. Batch checkout is all-or-nothing and reports every bad id
3. Cart cleanup after a sale
"""

from decimal import Decimal

import pytest

from src.service.marketplace.app.command.checkout_coordinator import CheckoutCoordinator
from src.service.marketplace.domain.checkout_error import (
    ProductNotFoundError,
    ProductUnavailableError,
    SelfPurchaseForbiddenError,
)
from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.domain.value_object.checkout_failure import CheckoutFailureReason
from test.service.marketplace.unit.in_memory_uow import InMemoryStore, InMemoryUnitOfWork


SELLER_ID = 1
BUYER_ID = 2
OTHER_BUYER_ID = 3


def make_coordinator(store: InMemoryStore) -> tuple[CheckoutCoordinator, InMemoryUnitOfWork]:
    uow = InMemoryUnitOfWork(store)
    return CheckoutCoordinator(uow=uow), uow


@pytest.mark.unit
class TestBuyNow:
    async def test_sells_product_and_records_purchase(self, store: InMemoryStore):
        # Given: an available product listed at 10.00
        product = store.add_product(owner_id=SELLER_ID, price='10.00')
        coordinator, uow = make_coordinator(store)

        # When
        result = await coordinator.buy_now(buyer_id=BUYER_ID, product_id=product.id)

        # Then: sold, one purchase with the seller and price from the product
        assert result.succeeded
        assert store.status_of(product.id) == ProductStatus.SOLD
        [purchase] = store.purchases_of(product.id)
        assert purchase.buyer_id == BUYER_ID
        assert purchase.seller_id == SELLER_ID
        assert purchase.price == Decimal('10.00')
        assert result.purchases == [purchase]
        assert result.sold_products[0].status == ProductStatus.SOLD
        assert uow.commits == 1

    async def test_clears_product_from_every_cart(self, store: InMemoryStore):
        product = store.add_product(owner_id=SELLER_ID)
        kept = store.add_product(owner_id=SELLER_ID)
        store.cart |= {(BUYER_ID, product.id), (OTHER_BUYER_ID, product.id), (BUYER_ID, kept.id)}
        coordinator, _ = make_coordinator(store)

        await coordinator.buy_now(buyer_id=BUYER_ID, product_id=product.id)

        assert store.cart == {(BUYER_ID, kept.id)}

    async def test_unknown_product_is_not_found(self, store: InMemoryStore):
        coordinator, uow = make_coordinator(store)

        result = await coordinator.buy_now(buyer_id=BUYER_ID, product_id=999)

        assert not result.succeeded
        [failure] = result.failures
        assert failure.reason == CheckoutFailureReason.PRODUCT_NOT_FOUND
        assert failure.message == 'Product 999 not found'
        assert isinstance(failure.to_error(), ProductNotFoundError)
        assert failure.to_error().status_code == 404
        assert uow.commits == 0

    async def test_own_product_is_forbidden(self, store: InMemoryStore):
        product = store.add_product(owner_id=BUYER_ID)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.buy_now(buyer_id=BUYER_ID, product_id=product.id)

        [failure] = result.failures
        assert failure.reason == CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN
        assert isinstance(failure.to_error(), SelfPurchaseForbiddenError)
        assert failure.to_error().status_code == 403
        assert store.status_of(product.id) == ProductStatus.AVAILABLE
        assert store.purchases == []

    async def test_own_sold_product_reports_self_purchase_first(self, store: InMemoryStore):
        product = store.add_product(owner_id=BUYER_ID, status=ProductStatus.SOLD)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.buy_now(buyer_id=BUYER_ID, product_id=product.id)

        assert result.failures[0].reason == CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN

    async def test_sold_product_is_unavailable(self, store: InMemoryStore):
        product = store.add_product(owner_id=SELLER_ID, status=ProductStatus.SOLD)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.buy_now(buyer_id=BUYER_ID, product_id=product.id)

        [failure] = result.failures
        assert failure.reason == CheckoutFailureReason.PRODUCT_UNAVAILABLE
        assert failure.message == f'Product {product.id} is no longer available'
        assert isinstance(failure.to_error(), ProductUnavailableError)
        assert failure.to_error().status_code == 409

    async def test_second_buy_now_of_same_product_fails(self, store: InMemoryStore):
        product = store.add_product(owner_id=SELLER_ID)
        first, _ = make_coordinator(store)
        second, _ = make_coordinator(store)

        assert (await first.buy_now(buyer_id=BUYER_ID, product_id=product.id)).succeeded
        result = await second.buy_now(buyer_id=OTHER_BUYER_ID, product_id=product.id)

        assert result.failures[0].reason == CheckoutFailureReason.PRODUCT_UNAVAILABLE
        assert len(store.purchases_of(product.id)) == 1


@pytest.mark.unit
class TestBatchPurchase:
    async def test_buys_every_product(self, store: InMemoryStore):
        a = store.add_product(owner_id=SELLER_ID, price='5.50')
        b = store.add_product(owner_id=OTHER_BUYER_ID, price='7.25')
        store.cart |= {(BUYER_ID, a.id), (BUYER_ID, b.id)}
        coordinator, _ = make_coordinator(store)

        result = await coordinator.purchase(buyer_id=BUYER_ID, product_ids=[b.id, a.id])

        assert result.succeeded
        # Processed in ascending id order
        assert [p.product_id for p in result.purchases] == [a.id, b.id]
        assert [p.seller_id for p in result.purchases] == [SELLER_ID, OTHER_BUYER_ID]
        assert store.status_of(a.id) == store.status_of(b.id) == ProductStatus.SOLD
        assert store.cart == set()

    async def test_duplicate_ids_are_bought_once(self, store: InMemoryStore):
        a = store.add_product(owner_id=SELLER_ID)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.purchase(buyer_id=BUYER_ID, product_ids=[a.id, a.id, a.id])

        assert result.succeeded
        assert len(result.purchases) == 1
        assert len(store.purchases) == 1

    async def test_one_sold_item_rejects_whole_batch(self, store: InMemoryStore):
        # Given: A is available, B was sold earlier, both in the buyer's cart
        a = store.add_product(owner_id=SELLER_ID)
        b = store.add_product(owner_id=SELLER_ID, status=ProductStatus.SOLD)
        store.cart |= {(BUYER_ID, a.id), (OTHER_BUYER_ID, a.id)}
        coordinator, uow = make_coordinator(store)

        # When
        result = await coordinator.purchase(buyer_id=BUYER_ID, product_ids=[a.id, b.id])

        # Then: nothing changed for A
        assert not result.succeeded
        assert result.purchases == []
        assert result.failure_messages == [f'Product {b.id} is no longer available']
        assert store.status_of(a.id) == ProductStatus.AVAILABLE
        assert store.purchases == []
        assert store.cart == {(BUYER_ID, a.id), (OTHER_BUYER_ID, a.id)}
        assert uow.commits == 0
        assert uow.rollbacks == 1

    async def test_reports_every_failing_id(self, store: InMemoryStore):
        own = store.add_product(owner_id=BUYER_ID)
        fine = store.add_product(owner_id=SELLER_ID)
        sold = store.add_product(owner_id=SELLER_ID, status=ProductStatus.SOLD)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.purchase(
            buyer_id=BUYER_ID, product_ids=[own.id, fine.id, sold.id, 999]
        )

        assert [(f.product_id, f.reason) for f in result.failures] == [
            (own.id, CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN),
            (sold.id, CheckoutFailureReason.PRODUCT_UNAVAILABLE),
            (999, CheckoutFailureReason.PRODUCT_NOT_FOUND),
        ]
        assert store.status_of(fine.id) == ProductStatus.AVAILABLE

    async def test_failure_after_successful_items_rolls_them_back(self, store: InMemoryStore):
        a = store.add_product(owner_id=SELLER_ID)
        b = store.add_product(owner_id=SELLER_ID)
        c = store.add_product(owner_id=BUYER_ID)
        coordinator, _ = make_coordinator(store)

        result = await coordinator.purchase(buyer_id=BUYER_ID, product_ids=[a.id, b.id, c.id])

        assert not result.succeeded
        assert store.status_of(a.id) == store.status_of(b.id) == ProductStatus.AVAILABLE
        assert store.purchases == []
