"""
Main API Router
Aggregates all API endpoints for v1
"""

from fastapi import APIRouter
from seat_booking.api.v1.endpoints import seats, bookings, health

api_router = APIRouter()

# Include all routers
api_router.include_router(seats.router, tags=["seats"])
api_router.include_router(bookings.router, tags=["bookings"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
