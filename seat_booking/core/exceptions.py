"""
Custom application exceptions
"""

from typing import Optional, Dict, Any


class SeatBookingException(Exception):
    """Base exception for the seat booking application"""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(SeatBookingException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} with id {identifier} not found"
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404
        )


class SeatNotFoundError(NotFoundError):
    """Seat id does not resolve to a seat"""

    def __init__(self, seat_id: int):
        super().__init__("Seat", seat_id)
        self.details = {"seat_id": seat_id}


class ValidationError(SeatBookingException):
    """Validation errors"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class BookingError(SeatBookingException):
    """Booking related errors"""

    def __init__(self, message: str, code: str = "BOOKING_ERROR", details: Optional[Dict] = None):
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            details=details
        )


class SeatAlreadyBookedError(BookingError):
    """Seat was booked before this request reached it"""

    def __init__(self, seat_id: int):
        super().__init__(
            message=f"seat with seatId {seat_id} is already booked",
            code="SEAT_ALREADY_BOOKED",
            details={"seat_id": seat_id}
        )


class BookingIdExhaustedError(SeatBookingException):
    """No unused booking id could be generated"""

    def __init__(self, attempts: int):
        super().__init__(
            message=f"Could not generate a unique booking id after {attempts} attempts",
            code="BOOKING_ID_EXHAUSTED",
            status_code=500,
            details={"attempts": attempts}
        )


class PricingError(SeatBookingException):
    """Price could not be computed"""

    def __init__(self, message: str, code: str = "PRICING_ERROR", details: Optional[Dict] = None):
        super().__init__(
            message=message,
            code=code,
            status_code=500,
            details=details
        )


class EmptySeatClassError(PricingError):
    """Occupancy requested for a class without seats"""

    def __init__(self, seat_class: Optional[str] = None):
        super().__init__(
            message=f"Seat class {seat_class!r} has no seats",
            code="EMPTY_SEAT_CLASS",
            details={"seat_class": seat_class}
        )


class PriceConfigurationError(SeatBookingException):
    """Price table data is inconsistent"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(
            message=message,
            code="PRICE_CONFIGURATION_ERROR",
            status_code=500,
            details=details
        )
