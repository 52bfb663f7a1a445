from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.add_to_cart_use_case import AddToCartUseCase
from src.service.marketplace.app.command.remove_from_cart_use_case import RemoveFromCartUseCase
from src.service.marketplace.app.query.list_cart_use_case import ListCartUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.marketplace.driving_adapter.http_controller.schema.cart_schema import (
    CartItemResponse,
    ProductRefRequest,
)
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import (
    MessageResponse,
)


router = APIRouter()


@router.get('', response_model=List[CartItemResponse])
@Logger.io(truncate_content=True)
async def list_cart(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListCartUseCase = Depends(ListCartUseCase.depends),
) -> List[CartItemResponse]:
    items = await use_case.list_cart(user_id=current_user.id)
    return [CartItemResponse(**item) for item in items]


@router.post('', response_model=MessageResponse)
@Logger.io
async def add_to_cart(
    request: ProductRefRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: AddToCartUseCase = Depends(AddToCartUseCase.depends),
) -> MessageResponse:
    await use_case.add(user_id=current_user.id, product_id=request.product_id)
    return MessageResponse(message='Product added to cart')


@router.delete('/{product_id}', response_model=MessageResponse)
@Logger.io
async def remove_from_cart(
    product_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: RemoveFromCartUseCase = Depends(RemoveFromCartUseCase.depends),
) -> MessageResponse:
    await use_case.remove(user_id=current_user.id, product_id=product_id)
    return MessageResponse(message='Product removed from cart')
