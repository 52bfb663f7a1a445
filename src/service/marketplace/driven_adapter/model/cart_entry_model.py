from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class CartEntryModel(Base):
    __tablename__ = 'cart_entry'
    __table_args__ = (UniqueConstraint('user_id', 'product_id', name='uq_cart_entry_user_product'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id'), nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('product.id'), nullable=False, index=True
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
