from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class CartEntryEntity:
    user_id: int
    product_id: int
    id: Optional[int] = None
    added_at: Optional[datetime] = None
