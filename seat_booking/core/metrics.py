"""
Prometheus metrics
"""

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "app_requests_total",
    "Total requests",
    ["method", "endpoint", "status"]
)
REQUEST_DURATION = Histogram(
    "app_request_duration_seconds",
    "Request duration",
    ["method", "endpoint"]
)
BOOKING_OUTCOMES = Counter(
    "seat_booking_outcomes_total",
    "Booking line items by outcome",
    ["outcome"]
)
