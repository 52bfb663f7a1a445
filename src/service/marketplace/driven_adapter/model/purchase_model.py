from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class PurchaseModel(Base):
    __tablename__ = 'purchase'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    buyer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, index=True
    )
    seller_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id'), nullable=False)
    # Unique: a product is sold at most once
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('product.id'), nullable=False, unique=True
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
