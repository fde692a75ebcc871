"""Business services package."""

from src.services.availability_service import AvailabilityService
from src.services.reservation_service import ReservationService
from src.services.timezone_service import InvalidDateRangeError, TimeZoneService

__all__ = [
    "AvailabilityService",
    "ReservationService",
    "TimeZoneService",
    "InvalidDateRangeError",
]
