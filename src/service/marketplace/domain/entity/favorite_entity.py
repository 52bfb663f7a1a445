from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class FavoriteEntity:
    user_id: int
    product_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
