from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.marketplace.domain.enum.payment_method import PaymentMethod
from src.service.marketplace.driving_adapter.http_controller.schema.common_schema import Money
from src.service.marketplace.driving_adapter.http_controller.schema.product_schema import (
    ProductResponse,
)


class PurchaseRequest(BaseModel):
    product_ids: Optional[List[int]] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'product_ids': [1, 2, 3]}}
    )


class PurchaseResponse(BaseModel):
    message: str
    purchased: int


class BuyNowRequest(BaseModel):
    product_id: int
    payment_method: PaymentMethod

    model_config = ConfigDict(
        json_schema_extra={'example': {'product_id': 1, 'payment_method': 'paypal'}}
    )


class BuyNowResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'message': 'Purchase successful! Your item has been booked.',
                'purchase_id': 7,
                'product': {'id': 1, 'title': 'Vintage Leather Jacket', 'price': 45.0},
                'payment_method': 'paypal',
                'total_amount': 45.0,
            }
        }
    )

    message: str
    purchase_id: int
    product: ProductResponse
    payment_method: PaymentMethod
    total_amount: Money


class PurchaseHistoryItem(BaseModel):
    id: int
    buyer_id: int
    seller_id: int
    product_id: int
    price: Money
    purchase_date: Optional[datetime] = None
    title: str
    description: str = ''
    image_url: Optional[str] = None
    seller_name: Optional[str] = None
