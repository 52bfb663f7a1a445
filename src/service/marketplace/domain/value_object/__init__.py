"""Marketplace Domain Value Objects"""

from src.service.marketplace.domain.value_object.checkout_failure import (
    CheckoutFailure,
    CheckoutFailureReason,
)
from src.service.marketplace.domain.value_object.checkout_result import CheckoutResult

__all__ = ['CheckoutFailure', 'CheckoutFailureReason', 'CheckoutResult']
