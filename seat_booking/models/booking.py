"""
Booking ledger model
"""

from sqlalchemy import Column, String, Integer, BigInteger, ForeignKey

from seat_booking.models.base import BaseModel


class BookingDetails(BaseModel):
    """
    Receipt for one booked seat
    """
    __tablename__ = "booking_details"

    name = Column(String(255), nullable=False, index=True)
    phone = Column(BigInteger, nullable=False, index=True)
    booking_id = Column(String(32), unique=True, nullable=False, index=True)
    seat_id = Column(Integer, ForeignKey("seats.id"), nullable=False, index=True)
    price = Column(String(20), nullable=False)

    def __repr__(self):
        return f"<BookingDetails(booking_id={self.booking_id}, seat_id={self.seat_id}, name={self.name}, price={self.price})>"
