"""Connector output models."""

from src.models.connector.availability import (
    DEFAULT_CURRENCY,
    AvailabilityResponse,
    RoomAvailability,
)
from src.models.connector.reservation import ReservationItem, ReservationResponse

__all__ = [
    "DEFAULT_CURRENCY",
    "RoomAvailability",
    "AvailabilityResponse",
    "ReservationItem",
    "ReservationResponse",
]
