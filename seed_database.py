"""
Database Seeding Script
Creates the tables and imports price tiers and seats from the data files
"""

import argparse
import asyncio

from seat_booking.config import settings
from seat_booking.core.database import Base, engine, async_session
from seat_booking.core.seeding import import_data
import seat_booking.models  # noqa: F401


async def create_tables(reset: bool = False):
    """Create all database tables"""
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    print("[OK] Database tables created")


async def seed_database(price_file: str, seat_file: str, reset: bool = False):
    """Main seeding function"""
    print("\n>>> Starting database seeding...")
    await create_tables(reset=reset)

    async with async_session() as session:
        try:
            counts = await import_data(session, price_file=price_file, seat_file=seat_file)
            await session.commit()
        except Exception as e:
            await session.rollback()
            print(f"\n[ERROR] Error during seeding: {e}")
            raise

    print(f"[OK] Imported {counts['price_tiers']} price tiers")
    print(f"[OK] Imported {counts['seats']} seats")
    print("\n[OK] Database seeding completed successfully!")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import seat and price data")
    parser.add_argument("--prices", default=settings.PRICE_DATA_FILE, help="price tier file (JSON or CSV)")
    parser.add_argument("--seats", default=settings.SEAT_DATA_FILE, help="seat file (JSON or CSV)")
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = parser.parse_args()

    asyncio.run(seed_database(args.prices, args.seats, reset=args.reset))
