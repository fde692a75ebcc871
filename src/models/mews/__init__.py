"""Mews Connector API response models."""

from src.models.mews.availability import AvailabilityPayload, CategoryAvailability
from src.models.mews.reservation import (
    Customer,
    MewsReservation,
    ReservationsPayload,
    Resource,
)
from src.models.mews.resource_category import ResourceCategory
from src.models.mews.service import BookableService, ServiceData

__all__ = [
    "BookableService",
    "ServiceData",
    "ResourceCategory",
    "CategoryAvailability",
    "AvailabilityPayload",
    "MewsReservation",
    "Customer",
    "Resource",
    "ReservationsPayload",
]
