"""
Pydantic schemas for request and response validation
"""

from seat_booking.schemas.seat import (
    SeatResponse,
    SeatPriceResponse,
    SeatImport,
    PriceTierImport
)
from seat_booking.schemas.booking import (
    BookingRequest,
    BookingConfirmation,
    BookingRecordResponse
)
from seat_booking.schemas.response import (
    ErrorResponse,
    HealthResponse
)

__all__ = [
    "SeatResponse",
    "SeatPriceResponse",
    "SeatImport",
    "PriceTierImport",
    "BookingRequest",
    "BookingConfirmation",
    "BookingRecordResponse",
    "ErrorResponse",
    "HealthResponse"
]
