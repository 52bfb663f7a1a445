from typing import List

from fastapi import APIRouter, Depends
from opentelemetry import trace

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.buy_now_use_case import BuyNowUseCase
from src.service.marketplace.app.command.purchase_cart_items_use_case import (
    PurchaseCartItemsUseCase,
)
from src.service.marketplace.app.query.list_purchases_use_case import ListPurchasesUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.marketplace.driving_adapter.http_controller.product_controller import (
    to_product_response,
)
from src.service.marketplace.driving_adapter.http_controller.schema.checkout_schema import (
    BuyNowRequest,
    BuyNowResponse,
    PurchaseHistoryItem,
    PurchaseRequest,
    PurchaseResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('/purchase', response_model=PurchaseResponse)
@Logger.io
async def purchase_cart_items(
    request: PurchaseRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: PurchaseCartItemsUseCase = Depends(PurchaseCartItemsUseCase.depends),
) -> PurchaseResponse:
    with tracer.start_as_current_span(
        'controller.purchase_cart_items',
        attributes={'user.id': current_user.id or 0},
    ):
        result = await use_case.purchase(
            buyer_id=current_user.id, product_ids=request.product_ids or []
        )
        if not result.succeeded:
            raise DomainError('Purchase failed', details=result.failure_messages)

        return PurchaseResponse(
            message='Purchase completed successfully', purchased=len(result.purchases)
        )


@router.post('/buy-now', response_model=BuyNowResponse)
@Logger.io
async def buy_now(
    request: BuyNowRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: BuyNowUseCase = Depends(BuyNowUseCase.depends),
) -> BuyNowResponse:
    with tracer.start_as_current_span(
        'controller.buy_now',
        attributes={'user.id': current_user.id or 0, 'product.id': request.product_id},
    ):
        result = await use_case.buy_now(
            buyer_id=current_user.id,
            product_id=request.product_id,
            payment_method=request.payment_method,
        )
        if not result.succeeded:
            raise result.failures[0].to_error()

        purchase = result.purchases[0]
        return BuyNowResponse(
            message='Purchase successful! Your item has been booked.',
            purchase_id=purchase.id,
            product=to_product_response(result.sold_products[0]),
            payment_method=request.payment_method,
            total_amount=purchase.price,
        )


@router.get('/purchases', response_model=List[PurchaseHistoryItem])
@Logger.io(truncate_content=True)
async def list_purchases(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListPurchasesUseCase = Depends(ListPurchasesUseCase.depends),
) -> List[PurchaseHistoryItem]:
    rows = await use_case.list_purchases(buyer_id=current_user.id)
    return [PurchaseHistoryItem(**row) for row in rows]
