from enum import StrEnum

import attrs

from src.platform.exception.exceptions import CustomBaseError
from src.service.marketplace.domain.checkout_error import (
    ProductNotFoundError,
    ProductUnavailableError,
    SelfPurchaseForbiddenError,
)


class CheckoutFailureReason(StrEnum):
    PRODUCT_NOT_FOUND = 'product_not_found'
    PRODUCT_UNAVAILABLE = 'product_unavailable'
    SELF_PURCHASE_FORBIDDEN = 'self_purchase_forbidden'


@attrs.frozen
class CheckoutFailure:
    product_id: int
    reason: CheckoutFailureReason

    @property
    def message(self) -> str:
        match self.reason:
            case CheckoutFailureReason.PRODUCT_NOT_FOUND:
                return f'Product {self.product_id} not found'
            case CheckoutFailureReason.PRODUCT_UNAVAILABLE:
                return f'Product {self.product_id} is no longer available'
            case CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN:
                return f'Cannot purchase your own product {self.product_id}'

    def to_error(self) -> CustomBaseError:
        match self.reason:
            case CheckoutFailureReason.PRODUCT_NOT_FOUND:
                return ProductNotFoundError(self.message)
            case CheckoutFailureReason.PRODUCT_UNAVAILABLE:
                return ProductUnavailableError(self.message)
            case CheckoutFailureReason.SELF_PURCHASE_FORBIDDEN:
                return SelfPurchaseForbiddenError(self.message)
