"""
Seat and price tier schemas
"""

from decimal import Decimal, InvalidOperation
from typing import Optional
from pydantic import Field, field_validator

from seat_booking.schemas.base import BaseSchema


class SeatResponse(BaseSchema):
    id: int
    seat_identifier: str
    seat_class: str
    is_booked: bool = False


class SeatPriceResponse(SeatResponse):
    """Seat merged with the price computed from current occupancy"""
    price: str


class SeatImport(BaseSchema):
    """One seat row from the bootstrap file"""
    id: int = Field(..., ge=0)
    seat_identifier: str = Field(..., min_length=1, max_length=50)
    seat_class: str = Field(..., min_length=1, max_length=50)
    is_booked: bool = False


class PriceTierImport(BaseSchema):
    """One price row from the bootstrap file; unset tiers are empty strings"""
    id: Optional[int] = None
    seat_class: str = Field(..., min_length=1, max_length=50)
    min_price: str = ""
    normal_price: str = ""
    max_price: str = ""

    @field_validator("min_price", "normal_price", "max_price", mode="before")
    @classmethod
    def validate_price(cls, v):
        if v is None:
            return ""
        v = str(v).strip()
        if not v:
            return ""
        # Accept "$12.50" as exported by spreadsheets
        candidate = v.lstrip("$")
        try:
            amount = Decimal(candidate)
        except InvalidOperation:
            raise ValueError(f"Invalid price {v!r}")
        if not amount.is_finite() or amount < 0:
            raise ValueError(f"Invalid price {v!r}")
        return v
