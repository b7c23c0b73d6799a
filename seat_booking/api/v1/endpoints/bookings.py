"""
Booking endpoints
"""

from typing import Any, List, Optional
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from seat_booking.core.database import get_session
from seat_booking.schemas.booking import (
    BookingRequest,
    BookingConfirmation,
    BookingRecordResponse,
    PHONE_MAX
)
from seat_booking.schemas.response import ErrorResponse
from seat_booking.services.booking import booking_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/booking",
    response_model=List[BookingConfirmation],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)
async def create_bookings(
    booking_requests: List[BookingRequest],
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    Book a batch of seats.

    Seats are processed in order and the batch stops at the first seat that is
    already booked (or does not exist). That seat's error is returned; seats
    booked earlier in the batch stay booked and their receipts are listed in
    the error details under "booked".
    """
    outcomes = await booking_service.submit_bookings(db, booking_requests)

    confirmations = [
        BookingConfirmation(booking_id=outcome.booking_id, price=outcome.price)
        for outcome in outcomes
        if outcome.succeeded
    ]

    last = outcomes[-1]
    if not last.succeeded:
        logger.warning(
            f"Booking batch stopped at seat {last.seat_id} ({last.status.value}), "
            f"{len(confirmations)} booked before it"
        )
        error = last.to_error()
        error.details["booked"] = [
            {"seatId": outcome.seat_id, **confirmation.model_dump(by_alias=True)}
            for outcome, confirmation in zip(outcomes, confirmations)
        ]
        raise error

    return confirmations


@router.get(
    "/bookings",
    response_model=List[BookingRecordResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def get_bookings(
    name: Optional[str] = Query(None, min_length=1),
    phone: Optional[int] = Query(None, ge=0, le=PHONE_MAX),
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    Find bookings made under a name OR a phone number
    """
    records = await booking_service.find_bookings(db, name=name, phone=phone)
    return [
        BookingRecordResponse(
            name=record.name,
            phone=record.phone,
            booking_id=record.booking_id,
            seat_id=record.seat_id,
            price=record.price
        )
        for record in records
    ]
