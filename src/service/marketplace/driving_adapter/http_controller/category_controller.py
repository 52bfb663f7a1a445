from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.query.list_categories_use_case import ListCategoriesUseCase
from src.service.marketplace.driving_adapter.http_controller.schema.product_schema import (
    CategoryResponse,
)


router = APIRouter()


@router.get('', response_model=List[CategoryResponse])
@Logger.io(truncate_content=True)
async def list_categories(
    use_case: ListCategoriesUseCase = Depends(ListCategoriesUseCase.depends),
) -> List[CategoryResponse]:
    categories = await use_case.list_categories()
    return [CategoryResponse(id=category.id or 0, name=category.name) for category in categories]
