"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.marketplace.driven_adapter.model.cart_entry_model import CartEntryModel
from src.service.marketplace.driven_adapter.model.category_model import CategoryModel
from src.service.marketplace.driven_adapter.model.favorite_model import FavoriteModel
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.product_view_model import ProductViewModel
from src.service.marketplace.driven_adapter.model.purchase_model import PurchaseModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel

__all__ = [
    'CartEntryModel',
    'CategoryModel',
    'FavoriteModel',
    'ProductModel',
    'ProductViewModel',
    'PurchaseModel',
    'UserModel',
]
