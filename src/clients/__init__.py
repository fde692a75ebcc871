"""API clients package."""

from src.clients.availability_endpoint import AvailabilityEndpoint
from src.clients.mews_client import (
    ConnectorError,
    MewsClient,
    NoBookableServicesError,
    PmsRequestFailedError,
)
from src.clients.reservations_endpoint import ReservationsEndpoint
from src.clients.resource_categories_endpoint import ResourceCategoriesEndpoint
from src.clients.services_endpoint import ServicesEndpoint

__all__ = [
    "MewsClient",
    "ConnectorError",
    "PmsRequestFailedError",
    "NoBookableServicesError",
    "ServicesEndpoint",
    "ResourceCategoriesEndpoint",
    "AvailabilityEndpoint",
    "ReservationsEndpoint",
]
