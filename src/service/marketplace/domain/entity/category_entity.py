from datetime import datetime
from typing import Optional

import attrs


DEFAULT_CATEGORY_NAMES: tuple[str, ...] = (
    'Electronics & Gadgets',
    'Home & Furniture',
    'Fashion & Accessories',
    'Vehicles',
    'Books, Music & Hobbies',
    'Sports & Fitness',
    'Kids & Baby',
    'Appliances',
    'Industrial & Business',
    'Pets & Supplies',
    'Free Stuff',
    'Miscellaneous',
)


@attrs.define
class CategoryEntity:
    name: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
