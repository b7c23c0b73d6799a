"""
Bootstrap import of price tiers and seats from static files
"""
import csv
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from seat_booking.config import settings
from seat_booking.core.database import async_session
from seat_booking.core.exceptions import PriceConfigurationError, ValidationError
from seat_booking.models.price_tier import PriceTier
from seat_booking.models.seat import Seat
from seat_booking.schemas.seat import PriceTierImport, SeatImport

logger = logging.getLogger(__name__)


def read_records(path) -> List[Dict[str, Any]]:
    """Read a JSON array or a CSV file with a header row"""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        with path.open(newline="", encoding="utf-8-sig") as f:
            return [
                # Blank cells mean "not provided"
                {k.strip(): v for k, v in row.items() if k and v not in (None, "")}
                for row in csv.DictReader(f)
            ]

    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValidationError(f"{path} must contain a JSON array of records")
    return data


def _validate(schema, records: Iterable[Dict[str, Any]], source: str):
    validated = []
    for index, record in enumerate(records):
        try:
            validated.append(schema.model_validate(record))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {source} record #{index}: {e.errors()[0]['msg']}") from e
    return validated


async def load_price_tiers(session: AsyncSession, records: Iterable[Dict[str, Any]]) -> List[PriceTier]:
    """
    Insert price tiers. A seat class may only have one tier, across the file
    and whatever is already stored.
    """
    tiers = _validate(PriceTierImport, records, "price tier")

    duplicates = sorted(c for c, n in Counter(t.seat_class for t in tiers).items() if n > 1)
    if duplicates:
        raise PriceConfigurationError(
            f"Duplicate price tiers for seat classes: {', '.join(duplicates)}",
            details={"seat_classes": duplicates}
        )

    existing = await session.execute(
        select(PriceTier.seat_class).where(PriceTier.seat_class.in_([t.seat_class for t in tiers]))
    )
    already_stored = sorted(existing.scalars().all())
    if already_stored:
        raise PriceConfigurationError(
            f"Price tiers already stored for seat classes: {', '.join(already_stored)}",
            details={"seat_classes": already_stored}
        )

    rows = [PriceTier(**tier.model_dump(exclude_none=True)) for tier in tiers]
    session.add_all(rows)
    await session.flush()
    logger.info(f"Imported {len(rows)} price tiers")
    return rows


async def load_seats(session: AsyncSession, records: Iterable[Dict[str, Any]]) -> List[Seat]:
    """Insert seats, keeping the ids from the file"""
    seats = _validate(SeatImport, records, "seat")

    duplicates = sorted(i for i, n in Counter(s.id for s in seats).items() if n > 1)
    if duplicates:
        raise ValidationError(f"Duplicate seat ids: {duplicates}", field="id")

    rows = [Seat(**seat.model_dump()) for seat in seats]
    session.add_all(rows)
    await session.flush()
    logger.info(f"Imported {len(rows)} seats")
    return rows


async def import_data(session: AsyncSession, price_file=None, seat_file=None) -> Dict[str, int]:
    """Load whichever tables are still empty"""
    counts = {"price_tiers": 0, "seats": 0}

    has_tiers = await session.execute(select(PriceTier.id).limit(1))
    if has_tiers.scalar_one_or_none() is None:
        rows = await load_price_tiers(session, read_records(price_file or settings.PRICE_DATA_FILE))
        counts["price_tiers"] = len(rows)
    else:
        logger.info("Price tiers already present, skipping import")

    has_seats = await session.execute(select(Seat.id).limit(1))
    if has_seats.scalar_one_or_none() is None:
        rows = await load_seats(session, read_records(seat_file or settings.SEAT_DATA_FILE))
        counts["seats"] = len(rows)
    else:
        logger.info("Seats already present, skipping import")

    return counts


async def seed_if_empty():
    """Seed database only if it's empty (startup auto-import)"""
    async with async_session() as session:
        try:
            counts = await import_data(session)
            await session.commit()
            logger.info(f"Data import completed: {counts}")
            return counts
        except Exception as e:
            await session.rollback()
            logger.error(f"Data import failed: {e}")
            raise
