"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    add_favorite_use_case,
    add_to_cart_use_case,
    buy_now_use_case,
    create_product_use_case,
    delete_product_use_case,
    purchase_cart_items_use_case,
    record_product_view_use_case,
    register_user_use_case,
    remove_favorite_use_case,
    remove_from_cart_use_case,
    update_product_use_case,
    update_profile_use_case,
)
from src.service.marketplace.app.query import (
    get_product_stats_use_case,
    get_product_use_case,
    get_profile_use_case,
    list_cart_use_case,
    list_categories_use_case,
    list_favorites_use_case,
    list_products_use_case,
    list_purchases_use_case,
    login_user_use_case,
)
from src.service.marketplace.driving_adapter.http_controller import auth_controller
from src.service.marketplace.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    # Checkout
    purchase_cart_items_use_case,
    buy_now_use_case,
    list_purchases_use_case,
    # Catalog
    create_product_use_case,
    update_product_use_case,
    delete_product_use_case,
    record_product_view_use_case,
    list_products_use_case,
    get_product_use_case,
    get_product_stats_use_case,
    list_categories_use_case,
    # Cart and favorites
    add_to_cart_use_case,
    remove_from_cart_use_case,
    list_cart_use_case,
    add_favorite_use_case,
    remove_favorite_use_case,
    list_favorites_use_case,
    # Users
    register_user_use_case,
    update_profile_use_case,
    login_user_use_case,
    get_profile_use_case,
    auth_controller,
    current_user,
]
