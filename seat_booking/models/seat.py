"""
Seat model
"""

from sqlalchemy import Column, String, Boolean, Integer

from seat_booking.models.base import BaseModel


class Seat(BaseModel):
    """
    Physical seat. ``is_booked`` only ever moves from False to True.
    """
    __tablename__ = "seats"

    # Seat ids come from the import file, not from a sequence
    id = Column(Integer, primary_key=True, autoincrement=False)
    seat_identifier = Column(String(50), nullable=False)
    seat_class = Column(String(50), nullable=False, index=True)
    is_booked = Column(Boolean, default=False, nullable=False, index=True)

    def to_response(self) -> dict:
        return {
            "id": self.id,
            "seat_identifier": self.seat_identifier,
            "seat_class": self.seat_class,
            "is_booked": self.is_booked,
        }

    def __repr__(self):
        return f"<Seat(id={self.id}, identifier={self.seat_identifier}, class={self.seat_class}, booked={self.is_booked})>"
