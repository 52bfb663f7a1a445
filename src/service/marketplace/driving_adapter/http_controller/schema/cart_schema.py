from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import Money


class ProductRefRequest(BaseModel):
    product_id: int

    model_config = ConfigDict(
        json_schema_extra={'example': {'product_id': 1}}
    )


class CartItemResponse(BaseModel):
    id: int
    product_id: int
    title: str
    price: Money
    image_url: Optional[str] = None
    status: str
    seller_name: Optional[str] = None
    added_at: Optional[datetime] = None


class FavoriteItemResponse(BaseModel):
    id: int
    product_id: int
    title: str
    description: str = ''
    price: Money
    image_url: Optional[str] = None
    status: str
    category_name: Optional[str] = None
    seller_name: Optional[str] = None
    created_at: Optional[datetime] = None
