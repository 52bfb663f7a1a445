from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.domain.enum.product_status import ProductCondition, ProductStatus


PRICE_QUANTUM = Decimal('0.01')
INVALID_LISTING_MESSAGE = 'Title and valid price are required'


def normalize_price(price: Any) -> Decimal:
    """Parse a price into a positive two-place Decimal or raise ValidationError"""
    if price is None or isinstance(price, bool):
        raise ValidationError(INVALID_LISTING_MESSAGE)
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise ValidationError(INVALID_LISTING_MESSAGE) from None
    if not value.is_finite() or value <= 0:
        raise ValidationError(INVALID_LISTING_MESSAGE)
    return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def normalize_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationError(INVALID_LISTING_MESSAGE)
    return title.strip()


@attrs.define
class ProductEntity:
    owner_id: int
    title: str
    price: Decimal
    description: str = ''
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    condition: ProductCondition = ProductCondition.GOOD
    status: ProductStatus = ProductStatus.AVAILABLE
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        owner_id: int,
        title: Optional[str],
        price: Any,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        condition: Optional[ProductCondition] = None,
    ) -> 'ProductEntity':
        now = datetime.now(timezone.utc)
        return cls(
            owner_id=owner_id,
            title=normalize_title(title),
            price=normalize_price(price),
            description=description or '',
            category_id=category_id,
            image_url=image_url or None,
            condition=condition or ProductCondition.GOOD,
            status=ProductStatus.AVAILABLE,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def revise(
        self,
        *,
        title: Optional[str],
        price: Any,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        condition: Optional[ProductCondition] = None,
    ) -> 'ProductEntity':
        """
        Apply an owner edit

        Omitted image and condition keep their current values. Status is never
        touched here, only checkout flips it.
        """
        return attrs.evolve(
            self,
            title=normalize_title(title),
            price=normalize_price(price),
            description=description or '',
            category_id=category_id,
            image_url=image_url if image_url is not None else self.image_url,
            condition=condition or self.condition,
            updated_at=datetime.now(timezone.utc),
        )

    @property
    def is_available(self) -> bool:
        return self.status == ProductStatus.AVAILABLE

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def validate_deletable(self) -> None:
        if self.status == ProductStatus.SOLD:
            raise ConflictError('Cannot delete a sold product')

    @staticmethod
    def validate_collectable(
        product: Optional['ProductEntity'], *, user_id: int, destination: str
    ) -> 'ProductEntity':
        """Only another seller's available product may go into a cart or favorites list"""
        if product is None or not product.is_available:
            raise NotFoundError('Product not found or unavailable')
        if product.is_owned_by(user_id):
            raise DomainError(f'Cannot add your own product to {destination}')
        return product

    @staticmethod
    def validate_owned(product: Optional['ProductEntity'], *, user_id: int) -> 'ProductEntity':
        if product is None or not product.is_owned_by(user_id):
            raise NotFoundError('Product not found or unauthorized')
        return product
