from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class ProductViewEntity:
    product_id: int
    user_id: Optional[int] = None
    ip_address: Optional[str] = None
    id: Optional[int] = None
    viewed_at: Optional[datetime] = None
