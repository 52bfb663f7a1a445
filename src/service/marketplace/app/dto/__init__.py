"""Application layer DTOs"""

from src.service.marketplace.app.dto.product_list_query import ProductListQuery, ProductSort

__all__ = ['ProductListQuery', 'ProductSort']
