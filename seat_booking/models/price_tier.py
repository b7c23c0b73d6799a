"""
Price tier model
"""

from sqlalchemy import Column, String

from seat_booking.models.base import BaseModel


class PriceTier(BaseModel):
    """
    Min/normal/max prices for one seat class.
    Prices are decimal strings; an empty string means the tier is not set.
    """
    __tablename__ = "seat_prices"

    seat_class = Column(String(50), unique=True, nullable=False, index=True)
    min_price = Column(String(20), nullable=False, default="")
    normal_price = Column(String(20), nullable=False, default="")
    max_price = Column(String(20), nullable=False, default="")

    def __repr__(self):
        return (
            f"<PriceTier(class={self.seat_class}, min={self.min_price!r}, "
            f"normal={self.normal_price!r}, max={self.max_price!r})>"
        )
