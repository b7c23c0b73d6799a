"""
Occupancy based seat pricing

Price rises with the share of booked seats in a seat class:

    occupancy < 40        min price,    falls back to normal
    40 <= occupancy <= 60 normal price, falls back to max
    occupancy > 60        max price,    falls back to normal
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from seat_booking.core.exceptions import (
    EmptySeatClassError,
    NotFoundError,
    SeatNotFoundError,
)
from seat_booking.models.price_tier import PriceTier
from seat_booking.models.seat import Seat

logger = logging.getLogger(__name__)

LOW_OCCUPANCY_LIMIT = 40
HIGH_OCCUPANCY_LIMIT = 60


def is_price_set(value: Optional[str]) -> bool:
    return value is not None and value != ""


def occupancy_percent(booked: int, total: int, seat_class: Optional[str] = None) -> float:
    """Share of booked seats in a class, 0-100"""
    if total <= 0:
        raise EmptySeatClassError(seat_class)
    if booked < 0 or booked > total:
        raise ValueError(f"Booked count {booked} outside 0..{total}")
    # Multiply first so exact band edges (2 of 5 = 40) stay exact
    return booked * 100 / total


def select_tier_price(occupancy: float, tier: PriceTier) -> str:
    """Pick the tier price for an occupancy percentage"""
    if occupancy < LOW_OCCUPANCY_LIMIT:
        preferred, fallback = tier.min_price, tier.normal_price
    elif occupancy <= HIGH_OCCUPANCY_LIMIT:
        preferred, fallback = tier.normal_price, tier.max_price
    else:
        preferred, fallback = tier.max_price, tier.normal_price

    if is_price_set(preferred):
        return preferred
    # The fallback is returned as stored, even when it is unset as well
    return fallback if fallback is not None else ""


class PricingService:
    """
    Computes the current price of a seat from live occupancy counts
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    async def get_seat(self, db: AsyncSession, seat_id: int) -> Seat:
        # populate_existing: the booking flow flips is_booked with a bulk UPDATE
        stmt = (
            select(Seat)
            .where(Seat.id == seat_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(stmt)
        seat = result.scalar_one_or_none()
        if seat is None:
            raise SeatNotFoundError(seat_id)
        return seat

    async def class_occupancy(self, db: AsyncSession, seat_class: str) -> Tuple[int, int]:
        """
        Return (booked, total) for a seat class.
        Both counts come from one statement so they describe the same snapshot.
        """
        stmt = select(
            func.coalesce(func.sum(case((Seat.is_booked.is_(True), 1), else_=0)), 0),
            func.count(Seat.id),
        ).where(Seat.seat_class == seat_class)
        result = await db.execute(stmt)
        booked, total = result.one()
        return int(booked), int(total)

    async def get_price_tier(self, db: AsyncSession, seat_class: str) -> PriceTier:
        stmt = select(PriceTier).where(PriceTier.seat_class == seat_class)
        result = await db.execute(stmt)
        tier = result.scalar_one_or_none()
        if tier is None:
            raise NotFoundError("Price tier for seat class", seat_class)
        return tier

    async def price_seat(self, db: AsyncSession, seat_id: int) -> dict:
        """
        Return the seat's attributes merged with its current ``price``
        """
        seat = await self.get_seat(db, seat_id)
        booked, total = await self.class_occupancy(db, seat.seat_class)
        occupancy = occupancy_percent(booked, total, seat.seat_class)
        tier = await self.get_price_tier(db, seat.seat_class)
        price = select_tier_price(occupancy, tier)

        self.logger.debug(
            f"Priced seat {seat_id} ({seat.seat_class}) at {price!r}, "
            f"occupancy {occupancy:.1f}% ({booked}/{total})"
        )
        return {**seat.to_response(), "price": price}


pricing_service = PricingService()
