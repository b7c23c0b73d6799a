"""
Test configuration and fixtures
Based on FastAPI + SQLAlchemy async + pytest best practices
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator, List
import os

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

# Set test environment
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PROMETHEUS_ENABLED"] = "false"

# Import all models BEFORE creating fixtures (critical for create_all to work)
from seat_booking.core.database import Base
from seat_booking.models.seat import Seat
from seat_booking.models.price_tier import PriceTier
from seat_booking.models.booking import BookingDetails


@pytest_asyncio.fixture(scope="function")
async def test_db():
    """In-memory database shared by every connection of the test"""
    engine = create_async_engine(
        os.environ["DATABASE_URL"],
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for tests"""
    async_session_maker = async_sessionmaker(
        test_db,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with dependency override"""
    from seat_booking.main import app
    from seat_booking.core.database import get_session

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


async def create_seats(db_session, seat_class: str, count: int, booked: int = 0, start_id: int = 1) -> List[Seat]:
    """Helper to create ``count`` seats of one class, the first ``booked`` of them booked"""
    seats = []
    for offset in range(count):
        seat = Seat(
            id=start_id + offset,
            seat_identifier=f"{seat_class}-{offset + 1}",
            seat_class=seat_class,
            is_booked=offset < booked
        )
        seats.append(seat)
        db_session.add(seat)

    await db_session.commit()
    return seats


async def create_price_tier(db_session, seat_class: str, min_price="", normal_price="", max_price="") -> PriceTier:
    tier = PriceTier(
        seat_class=seat_class,
        min_price=min_price,
        normal_price=normal_price,
        max_price=max_price
    )
    db_session.add(tier)
    await db_session.commit()
    return tier


@pytest_asyncio.fixture
async def class_a_tier(db_session):
    """Price tier with every price set"""
    return await create_price_tier(db_session, "A", "100", "150", "200")


@pytest_asyncio.fixture
async def class_a_seats(db_session, class_a_tier):
    """Ten seats in class A, three of them booked (30% occupancy)"""
    return await create_seats(db_session, "A", 10, booked=3, start_id=1)


@pytest_asyncio.fixture
async def mixed_seats(db_session):
    """Seats in two classes with price tiers, inserted out of order"""
    await create_price_tier(db_session, "premium", "300", "400", "500")
    await create_price_tier(db_session, "economy", "", "50", "80")
    premium = await create_seats(db_session, "premium", 2, start_id=1)
    economy = await create_seats(db_session, "economy", 3, start_id=3)
    return premium + economy


@pytest.fixture
def booking_payload():
    """Build a POST /booking body"""
    def build(*seat_ids, name="Alice", number=9876543210):
        return [{"seatId": seat_id, "name": name, "number": number} for seat_id in seat_ids]
    return build
