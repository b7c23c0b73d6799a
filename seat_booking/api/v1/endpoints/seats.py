"""
Seat inventory and pricing endpoints
"""

from typing import Any, List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from seat_booking.core.database import get_session
from seat_booking.models.seat import Seat
from seat_booking.schemas.seat import SeatResponse, SeatPriceResponse
from seat_booking.schemas.response import ErrorResponse
from seat_booking.services.pricing import pricing_service

router = APIRouter()


@router.get("/seats", response_model=List[SeatResponse])
async def get_seats(
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    List all seats ordered by seat class, then id
    """
    stmt = select(Seat).order_by(Seat.seat_class, Seat.id)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get(
    "/seats/{seat_id}",
    response_model=SeatPriceResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_seat_price(
    seat_id: int,
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    Get a seat with its price for the current occupancy of its class
    """
    return await pricing_service.price_seat(db, seat_id)
