from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ProductModel(Base):
    __tablename__ = 'product'
    __table_args__ = (
        CheckConstraint('price > 0', name='ck_product_price_positive'),
        CheckConstraint("status IN ('available', 'sold')", name='ck_product_status'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id'), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default='', nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('category.id'), nullable=True, index=True
    )
    image_url: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    condition: Mapped[str] = mapped_column(String(20), default='good', nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default='available', nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return f'<ProductModel(id={self.id}, title={self.title}, status={self.status})>'
