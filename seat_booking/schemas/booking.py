"""
Booking schemas
"""

from pydantic import Field

from seat_booking.schemas.base import BaseSchema

# booking_details.phone is a signed 64-bit column
PHONE_MAX = 2 ** 63 - 1


class BookingRequest(BaseSchema):
    """One line item of a booking batch"""
    seat_id: int = Field(..., alias="seatId")
    name: str = Field(..., min_length=1, max_length=255)
    phone: int = Field(..., alias="number", ge=0, le=PHONE_MAX)


class BookingConfirmation(BaseSchema):
    """Receipt returned for a booked seat"""
    booking_id: str = Field(..., alias="bookingId")
    price: str


class BookingRecordResponse(BaseSchema):
    """Ledger entry returned by the booking lookup"""
    name: str
    phone: int
    booking_id: str = Field(..., alias="bookingId")
    seat_id: int = Field(..., alias="seatId")
    price: str
