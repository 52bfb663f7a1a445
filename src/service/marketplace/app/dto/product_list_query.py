"""Catalog listing filter DTO."""

from decimal import Decimal
from enum import StrEnum
from typing import Optional

import attrs


class ProductSort(StrEnum):
    NEWEST = 'newest'
    OLDEST = 'oldest'
    PRICE_LOW = 'price_low'
    PRICE_HIGH = 'price_high'


@attrs.define(frozen=True)
class ProductListQuery:
    category_id: Optional[int] = None
    search: Optional[str] = None
    user_id: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort: ProductSort = ProductSort.NEWEST
    page: int = 1
    limit: int = 12

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
