from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.marketplace.domain.enum.product_status import ProductCondition, ProductStatus
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import Money


class ProductWriteRequest(BaseModel):
    # Title and price are checked by the domain so the error message stays specific
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    condition: Optional[ProductCondition] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Vintage Leather Jacket',
                'description': 'Genuine leather, size M, barely worn',
                'price': '45.00',
                'category_id': 3,
                'condition': 'very_good',
            }
        }
    )


class BulkCreateRequest(BaseModel):
    products: List[ProductWriteRequest] = []


class ProductCreatedResponse(BaseModel):
    message: str
    product_id: int
    image_url: Optional[str] = None


class BulkCreatedItem(BaseModel):
    product_id: int
    title: str
    image_url: Optional[str] = None


class BulkErrorItem(BaseModel):
    product: Optional[str] = None
    error: str


class BulkCreateResponse(BaseModel):
    message: str
    created: List[BulkCreatedItem]
    errors: List[BulkErrorItem]


class ProductResponse(BaseModel):
    id: int
    owner_id: int
    title: str
    description: str = ''
    price: Money
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    image_url: Optional[str] = None
    condition: ProductCondition
    status: ProductStatus
    seller_name: Optional[str] = None
    seller_phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginationResponse(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
    pagination: PaginationResponse


class ProductStatsResponse(BaseModel):
    view_count: int
    favorites_count: int
    created_at: Optional[datetime] = None
    status: ProductStatus


class CategoryResponse(BaseModel):
    id: int
    name: str
