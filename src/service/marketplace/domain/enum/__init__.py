"""Marketplace Domain Enums"""

from src.service.marketplace.domain.enum.payment_method import PaymentMethod
from src.service.marketplace.domain.enum.product_status import ProductCondition, ProductStatus

__all__ = ['PaymentMethod', 'ProductCondition', 'ProductStatus']
