from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.add_favorite_use_case import AddFavoriteUseCase
from src.service.marketplace.app.command.remove_favorite_use_case import RemoveFavoriteUseCase
from src.service.marketplace.app.query.list_favorites_use_case import ListFavoritesUseCase
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.marketplace.driving_adapter.http_controller.schema.cart_schema import (
    FavoriteItemResponse,
    ProductRefRequest,
)
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import (
    MessageResponse,
)


router = APIRouter()


@router.get('', response_model=List[FavoriteItemResponse])
@Logger.io(truncate_content=True)
async def list_favorites(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListFavoritesUseCase = Depends(ListFavoritesUseCase.depends),
) -> List[FavoriteItemResponse]:
    items = await use_case.list_favorites(user_id=current_user.id)
    return [FavoriteItemResponse(**item) for item in items]


@router.post('', response_model=MessageResponse)
@Logger.io
async def add_favorite(
    request: ProductRefRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: AddFavoriteUseCase = Depends(AddFavoriteUseCase.depends),
) -> MessageResponse:
    await use_case.add(user_id=current_user.id, product_id=request.product_id)
    return MessageResponse(message='Product added to favorites')


@router.delete('/{product_id}', response_model=MessageResponse)
@Logger.io
async def remove_favorite(
    product_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: RemoveFavoriteUseCase = Depends(RemoveFavoriteUseCase.depends),
) -> MessageResponse:
    await use_case.remove(user_id=current_user.id, product_id=product_id)
    return MessageResponse(message='Product removed from favorites')
