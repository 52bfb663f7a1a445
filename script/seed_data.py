#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Ensure Categories - insert any missing default category
2. Create Users - 3 demo users sharing one password
3. Create Products - a few listings per user
4. Create Favorites - cross-user favorites for the listing pages

Notes:
- Run after `alembic upgrade head` (or `python script/reset_database.py`)
- Re-running on a seeded database fails on the unique username/email
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal

import attrs

from src.platform.config.di import container
from src.platform.database.orm_db_setting import dispose_engine
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.enum.product_status import ProductCondition


DEFAULT_PASSWORD = 'password123'


@dataclass
class UserConfig:
    """User seed configuration"""

    username: str
    email: str
    full_name: str
    phone: str
    address: str


@dataclass
class ProductConfig:
    """Product seed configuration, owner is an index into TEST_USERS"""

    title: str
    description: str
    price: str
    category: str
    owner: int
    condition: ProductCondition


TEST_USERS = [
    UserConfig(
        username='alice_green',
        email='alice@example.com',
        full_name='Alice Green',
        phone='+1-555-0101',
        address='123 Eco Street, Green City, GC 12345',
    ),
    UserConfig(
        username='bob_sustainable',
        email='bob@example.com',
        full_name='Bob Sustainable',
        phone='+1-555-0102',
        address='456 Recycle Road, Eco Town, ET 67890',
    ),
    UserConfig(
        username='charlie_earth',
        email='charlie@example.com',
        full_name='Charlie Earth',
        phone='+1-555-0103',
        address='789 Green Avenue, Nature City, NC 54321',
    ),
]

TEST_PRODUCTS = [
    ProductConfig(
        'Vintage MacBook Pro 2019',
        '13-inch, 8GB RAM, 256GB SSD. Comes with original charger.',
        '899.99',
        'Electronics & Gadgets',
        0,
        ProductCondition.EXCELLENT,
    ),
    ProductConfig(
        'Designer Leather Jacket',
        'Genuine leather jacket in black, size M. Worn only a few times.',
        '149.99',
        'Fashion & Accessories',
        1,
        ProductCondition.EXCELLENT,
    ),
    ProductConfig(
        'Complete Harry Potter Book Set',
        'All 7 books in hardcover.',
        '79.99',
        'Books, Music & Hobbies',
        2,
        ProductCondition.EXCELLENT,
    ),
    ProductConfig(
        'Nike Air Max 270',
        'White, size 10. Great for running or casual wear.',
        '89.99',
        'Fashion & Accessories',
        0,
        ProductCondition.GOOD,
    ),
    ProductConfig(
        'Gaming Chair - Ergonomic',
        'Lumbar support, adjustable height, comfortable padding.',
        '199.99',
        'Home & Furniture',
        1,
        ProductCondition.VERY_GOOD,
    ),
    ProductConfig(
        'iPhone 12 Pro',
        '128GB in Pacific Blue with original box and accessories.',
        '699.99',
        'Electronics & Gadgets',
        2,
        ProductCondition.EXCELLENT,
    ),
    ProductConfig(
        'Yoga Mat - Premium',
        'Non-slip surface, easy to clean.',
        '39.99',
        'Sports & Fitness',
        0,
        ProductCondition.GOOD,
    ),
    ProductConfig(
        'Bicycle - Mountain Bike',
        '21-speed, recently serviced.',
        '299.99',
        'Sports & Fitness',
        0,
        ProductCondition.EXCELLENT,
    ),
]

# (user index, product index)
TEST_FAVORITES = [(1, 0), (2, 0), (0, 1), (2, 4), (0, 5), (1, 6)]


async def create_users() -> list[UserEntity]:
    print(f'👥 Creating {len(TEST_USERS)} users...')
    password_hasher = container.password_hasher()
    users: list[UserEntity] = []

    async with container.unit_of_work() as uow:
        for config in TEST_USERS:
            user = UserEntity.register(
                username=config.username,
                email=config.email,
                plain_password=DEFAULT_PASSWORD,
                password_hasher=password_hasher,
                full_name=config.full_name,
            )
            user = attrs.evolve(user, phone=config.phone, address=config.address)
            created = await uow.user_command_repo.create(user_entity=user)
            users.append(created)
            print(f'   ✅ {created.username} (ID: {created.id})')
        await uow.commit()

    return users


async def create_products(users: list[UserEntity]) -> list[ProductEntity]:
    print(f'📦 Creating {len(TEST_PRODUCTS)} products...')
    categories = {c.name: c.id for c in await container.category_repo().list_all()}
    products: list[ProductEntity] = []

    async with container.unit_of_work() as uow:
        for config in TEST_PRODUCTS:
            product = ProductEntity.create(
                owner_id=users[config.owner].id,
                title=config.title,
                price=Decimal(config.price),
                description=config.description,
                category_id=categories.get(config.category),
                condition=config.condition,
            )
            created = await uow.product_command_repo.create(product=product)
            products.append(created)
            print(f'   ✅ {created.title} (ID: {created.id})')
        await uow.commit()

    return products


async def create_favorites(users: list[UserEntity], products: list[ProductEntity]) -> None:
    print(f'❤️  Creating {len(TEST_FAVORITES)} favorites...')
    async with container.unit_of_work() as uow:
        for user_index, product_index in TEST_FAVORITES:
            await uow.favorite_command_repo.add(
                user_id=users[user_index].id, product_id=products[product_index].id
            )
        await uow.commit()


async def main():
    print('🌱 Starting to seed the database...')
    print('=' * 50)

    try:
        inserted = await container.category_repo().ensure_defaults()
        print(f'🏷️  Inserted {inserted} missing categories')

        users = await create_users()
        products = await create_products(users)
        await create_favorites(users, products)

        print('=' * 50)
        print('✅ Seeding completed!')
        print(f'🔑 Every demo user logs in with password: {DEFAULT_PASSWORD}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
