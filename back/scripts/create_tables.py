#!/usr/bin/env python
"""
Script to create database tables for the CivicReport application
"""

# Standard library imports
import asyncio
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Third-party imports
from sqlalchemy import inspect

# Local application imports
import app.models  # noqa: F401 registers every table on Base.metadata
from app.core.db.create_async_engine import async_engine
from app.models.base import Base


async def create_tables(drop_existing: bool = False) -> None:
    """Create all tables in the database"""
    print("Creating database tables...")

    try:
        async with async_engine.begin() as conn:
            if drop_existing:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
            table_names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        print("✅ All tables created successfully!")
        print("\nTables:")
        for table_name in sorted(table_names):
            print(f"  - {table_name}")

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        sys.exit(1)
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_tables(drop_existing="--drop" in sys.argv))
