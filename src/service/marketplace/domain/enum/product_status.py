"""
Product lifecycle enums

A listing starts AVAILABLE and moves to SOLD exactly once, through checkout.
"""

from enum import StrEnum


class ProductStatus(StrEnum):
    AVAILABLE = 'available'
    SOLD = 'sold'


class ProductCondition(StrEnum):
    EXCELLENT = 'excellent'
    VERY_GOOD = 'very_good'
    GOOD = 'good'
    FAIR = 'fair'
    POOR = 'poor'
