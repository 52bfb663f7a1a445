#!/usr/bin/env python3
"""
Database Reset Script
Reset the PostgreSQL marketplace database

Features:
1. Drop & Recreate Database - completely wipe the database
2. Run Alembic Migrations - create the latest schema and default categories

Notes:
- This script only resets database structure, does not seed demo data
- To seed demo data, run `python script/seed_data.py`
"""

import asyncio
import subprocess

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR


DB_WAIT_SECONDS = 1


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Split a database URL into (server_url, db_name)"""
    server_url, db_name = database_url.rsplit('/', 1)
    return server_url, db_name


async def _drop_and_create_db(server_url: str, db_name: str) -> None:
    """Drop and recreate database, terminating open connections first"""
    admin_engine = create_async_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')

    try:
        async with admin_engine.connect() as conn:
            await conn.execute(
                text(
                    'SELECT pg_terminate_backend(pid) FROM pg_stat_activity '
                    'WHERE datname = :db_name AND pid <> pg_backend_pid()'
                ),
                {'db_name': db_name},
            )

            await conn.execute(text(f'DROP DATABASE IF EXISTS "{db_name}"'))
            print(f"   ✅ Database '{db_name}' dropped")
            await asyncio.sleep(DB_WAIT_SECONDS)

            await conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            print(f"   ✅ Database '{db_name}' created")
            await asyncio.sleep(DB_WAIT_SECONDS)
    finally:
        await admin_engine.dispose()


def _run_alembic_migrations() -> None:
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def main():
    if settings.IS_SQLITE:
        print('❌ Reset only supports PostgreSQL, unset DATABASE_URL to use POSTGRES_* settings')
        exit(1)

    server_url, db_name = _parse_db_connection(settings.DATABASE_URL_ASYNC)
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Server URL: {server_url}')
    print(f'Database name: {db_name}')

    try:
        print('🗑️ Dropping database...')
        await _drop_and_create_db(server_url, db_name)

        print('🏗️ Running database migrations...')
        _run_alembic_migrations()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed demo data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
