"""
Booking orchestration: batch seat booking and ledger lookup
"""

import enum
import logging
import secrets
import string
from dataclasses import dataclass
from typing import List, Optional, Sequence

from sqlalchemy import select, update, or_, exists
from sqlalchemy.ext.asyncio import AsyncSession

from seat_booking.config import settings
from seat_booking.core.exceptions import (
    BookingIdExhaustedError,
    SeatAlreadyBookedError,
    SeatBookingException,
    SeatNotFoundError,
    ValidationError,
)
from seat_booking.core.metrics import BOOKING_OUTCOMES
from seat_booking.models.booking import BookingDetails
from seat_booking.models.seat import Seat
from seat_booking.schemas.booking import BookingRequest
from seat_booking.services.pricing import PricingService, pricing_service

logger = logging.getLogger(__name__)

BOOKING_ID_ALPHABET = string.ascii_uppercase + string.digits


class OutcomeStatus(str, enum.Enum):
    BOOKED = "booked"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass
class BookingOutcome:
    """Result of one line item of a booking batch"""
    seat_id: int
    status: OutcomeStatus
    booking_id: Optional[str] = None
    price: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.BOOKED

    def to_error(self) -> SeatBookingException:
        if self.status == OutcomeStatus.CONFLICT:
            return SeatAlreadyBookedError(self.seat_id)
        return SeatNotFoundError(self.seat_id)


def generate_booking_id(length: Optional[int] = None) -> str:
    length = length or settings.BOOKING_ID_LENGTH
    return "".join(secrets.choice(BOOKING_ID_ALPHABET) for _ in range(length))


class BookingService:
    """
    Books seats one request at a time.

    Each successful line item is committed on its own, so a failure later in
    the batch leaves earlier bookings in place.
    """

    def __init__(self, pricing: PricingService = pricing_service):
        self.pricing = pricing
        self.logger = logging.getLogger(__name__)

    async def _claim_seat(self, db: AsyncSession, seat_id: int) -> bool:
        """Flip is_booked False -> True; False when another booking got there first"""
        stmt = (
            update(Seat)
            .where(Seat.id == seat_id, Seat.is_booked.is_(False))
            .values(is_booked=True)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1

    async def _seat_exists(self, db: AsyncSession, seat_id: int) -> bool:
        result = await db.execute(select(exists().where(Seat.id == seat_id)))
        return bool(result.scalar())

    async def _new_booking_id(self, db: AsyncSession) -> str:
        attempts = settings.BOOKING_ID_MAX_ATTEMPTS
        for _ in range(attempts):
            candidate = generate_booking_id()
            taken = await db.execute(
                select(exists().where(BookingDetails.booking_id == candidate))
            )
            if not taken.scalar():
                return candidate
            self.logger.warning(f"Booking id collision on {candidate}, regenerating")
        raise BookingIdExhaustedError(attempts)

    async def book_seat(self, db: AsyncSession, request: BookingRequest) -> BookingOutcome:
        """Book a single seat and write its ledger entry"""
        seat_id = request.seat_id
        try:
            claimed = await self._claim_seat(db, seat_id)
            if not claimed:
                # Nothing was written for this item
                if await self._seat_exists(db, seat_id):
                    self.logger.info(f"Seat {seat_id} is already booked")
                    return BookingOutcome(seat_id, OutcomeStatus.CONFLICT)
                self.logger.info(f"Seat {seat_id} does not exist")
                return BookingOutcome(seat_id, OutcomeStatus.NOT_FOUND)

            # Priced after the claim, so this seat counts towards occupancy
            priced = await self.pricing.price_seat(db, seat_id)
            booking_id = await self._new_booking_id(db)

            db.add(BookingDetails(
                name=request.name,
                phone=request.phone,
                booking_id=booking_id,
                seat_id=seat_id,
                price=priced["price"],
            ))
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        self.logger.info(f"Seat {seat_id} booked as {booking_id} at {priced['price']!r}")
        return BookingOutcome(seat_id, OutcomeStatus.BOOKED, booking_id, priced["price"])

    async def submit_bookings(
        self,
        db: AsyncSession,
        requests: Sequence[BookingRequest]
    ) -> List[BookingOutcome]:
        """
        Process a booking batch sequentially, in submission order.

        Stops at the first conflict or unknown seat, so the last outcome is
        the only failed one. Seats booked before it stay committed. Store
        errors propagate.
        """
        if not requests:
            raise ValidationError("Booking batch must contain at least one seat")
        if len(requests) > settings.MAX_SEATS_PER_BOOKING:
            raise ValidationError(
                f"Booking batch may contain at most {settings.MAX_SEATS_PER_BOOKING} seats"
            )

        outcomes = []
        for request in requests:
            outcome = await self.book_seat(db, request)
            BOOKING_OUTCOMES.labels(outcome=outcome.status.value).inc()
            outcomes.append(outcome)
            if not outcome.succeeded:
                break
        return outcomes

    async def find_bookings(
        self,
        db: AsyncSession,
        name: Optional[str] = None,
        phone: Optional[int] = None
    ) -> List[BookingDetails]:
        """Ledger entries matching the name OR the phone"""
        clauses = []
        if name:
            clauses.append(BookingDetails.name == name)
        if phone is not None:
            clauses.append(BookingDetails.phone == phone)
        if not clauses:
            raise ValidationError("No user identifier provided. Pass name or phone.")

        stmt = (
            select(BookingDetails)
            .where(or_(*clauses))
            .order_by(BookingDetails.created_at, BookingDetails.id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())


booking_service = BookingService()
