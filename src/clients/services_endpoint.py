"""Mews services endpoint: bookable service catalog of a property."""

from typing import Optional

from pydantic import ValidationError
from structlog import get_logger

from src.clients.mews_client import MewsClient, NoBookableServicesError
from src.models.mews import BookableService

logger = get_logger(__name__)


class ServicesEndpoint:
    """Fetches services and keeps the ones availability can be queried for."""

    ENDPOINT = "/api/connector/v1/services/getAll"

    def __init__(self, client: Optional[MewsClient] = None):
        self.client = client or MewsClient()

    def get_bookable_services(self, property_id: str) -> list[BookableService]:
        """Fetch the active, Day-based bookable services of a property.

        A service belongs to the property when its Id or its EnterpriseId
        equals property_id.

        Args:
            property_id: Mews enterprise (or service) identifier

        Returns:
            Bookable services in the order Mews returned them

        Raises:
            PmsRequestFailedError: If the API request fails
            NoBookableServicesError: If no service matches
        """
        logger.info("Fetching services from Mews", property_id=property_id)
        response = self.client.post(self.ENDPOINT)

        raw_services = (response or {}).get("Services") or []
        bookable_services = []
        for raw_service in raw_services:
            try:
                service = BookableService.model_validate(raw_service)
            except ValidationError as e:
                logger.debug(
                    "Skipping unparsable service",
                    property_id=property_id,
                    error=str(e),
                )
                continue
            if service.is_bookable_day_service_for(property_id):
                bookable_services.append(service)

        if not bookable_services:
            logger.warning(
                "No bookable services found",
                property_id=property_id,
                service_count=len(raw_services),
            )
            raise NoBookableServicesError(property_id)

        logger.info(
            "Successfully fetched bookable services",
            property_id=property_id,
            service_count=len(raw_services),
            bookable_count=len(bookable_services),
        )
        return bookable_services
