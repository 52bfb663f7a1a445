from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs


@attrs.frozen
class PurchaseEntity:
    """Completed sale, price and seller are snapshots taken when the product flipped to sold"""

    buyer_id: int
    seller_id: int
    product_id: int
    price: Decimal
    id: Optional[int] = None
    purchase_date: Optional[datetime] = None
