"""init_marketplace_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Schema:
- user: Accounts with profile fields
- category: Listing categories, seeded with the defaults
- product: Listings, status moves available -> sold exactly once
- cart_entry: One row per (user, product)
- purchase: Append-only ledger, at most one row per product
- favorite: One row per (user, product)
- product_view: View log used by seller stats
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from src.service.marketplace.domain.entity.category_entity import DEFAULT_CATEGORY_NAMES


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = 'created_at') -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False
    )


def upgrade() -> None:
    """Create all tables and seed the default categories."""

    # ========== Accounts and catalog ==========

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('address', sa.String(length=500), nullable=False, server_default=''),
        sa.Column('profile_image_url', sa.String(length=1000), nullable=False, server_default=''),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    category_table = op.create_table(
        'category',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.String(length=1000), nullable=True),
        sa.Column('condition', sa.String(length=20), nullable=False, server_default='good'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='available'),
        _created_at(),
        _created_at('updated_at'),
        sa.ForeignKeyConstraint(['owner_id'], ['user.id']),
        sa.ForeignKeyConstraint(['category_id'], ['category.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price > 0', name='ck_product_price_positive'),
        sa.CheckConstraint("status IN ('available', 'sold')", name='ck_product_status'),
    )
    op.create_index(op.f('ix_product_owner_id'), 'product', ['owner_id'])
    op.create_index(op.f('ix_product_category_id'), 'product', ['category_id'])
    op.create_index(op.f('ix_product_status'), 'product', ['status'])
    op.create_index(op.f('ix_product_created_at'), 'product', ['created_at'])

    # ========== Buyer side ==========

    op.create_table(
        'cart_entry',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        _created_at('added_at'),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'product_id', name='uq_cart_entry_user_product'),
    )
    op.create_index(op.f('ix_cart_entry_product_id'), 'cart_entry', ['product_id'])

    op.create_table(
        'purchase',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('buyer_id', sa.Integer(), nullable=False),
        sa.Column('seller_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        _created_at('purchase_date'),
        sa.ForeignKeyConstraint(['buyer_id'], ['user.id']),
        sa.ForeignKeyConstraint(['seller_id'], ['user.id']),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('product_id'),
    )
    op.create_index(op.f('ix_purchase_buyer_id'), 'purchase', ['buyer_id'])

    op.create_table(
        'favorite',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'product_id', name='uq_favorite_user_product'),
    )
    op.create_index(op.f('ix_favorite_product_id'), 'favorite', ['product_id'])

    op.create_table(
        'product_view',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('ip_address', sa.String(length=64), nullable=True),
        _created_at('viewed_at'),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_product_view_product_id'), 'product_view', ['product_id'])

    # ========== Seed ==========

    op.bulk_insert(category_table, [{'name': name} for name in DEFAULT_CATEGORY_NAMES])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('product_view')
    op.drop_table('favorite')
    op.drop_table('purchase')
    op.drop_table('cart_entry')
    op.drop_table('product')
    op.drop_table('category')
    op.drop_table('user')
