"""
Database models
"""

from seat_booking.models.seat import Seat
from seat_booking.models.price_tier import PriceTier
from seat_booking.models.booking import BookingDetails

__all__ = [
    "Seat",
    "PriceTier",
    "BookingDetails"
]
