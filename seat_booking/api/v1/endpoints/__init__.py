"""
API endpoints module
"""

from . import seats, bookings, health

__all__ = [
    "seats",
    "bookings",
    "health"
]
