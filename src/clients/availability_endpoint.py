"""Mews availability endpoint: per-day category availability of one service."""

from typing import Optional

from structlog import get_logger

from src.clients.mews_client import MewsClient
from src.models.connector import RoomAvailability
from src.models.mews import ResourceCategory
from src.transformers.availability_transformer import AvailabilityTransformer

logger = get_logger(__name__)


class AvailabilityEndpoint:
    """Fetches availability of one service and filters it for a party."""

    ENDPOINT = "/api/connector/v1/services/getAvailability"

    def __init__(self, client: Optional[MewsClient] = None):
        self.client = client or MewsClient()

    def get_for_service(
        self,
        service_id: str,
        first_time_unit_start_utc: str,
        last_time_unit_start_utc: str,
        resource_categories: list[ResourceCategory],
        adults: int,
    ) -> list[RoomAvailability]:
        """Fetch availability for a service and keep the bookable categories.

        Args:
            service_id: Mews service identifier
            first_time_unit_start_utc: UTC start of the first night
            last_time_unit_start_utc: UTC start of the last night
            resource_categories: Categories used to resolve names and capacity
            adults: Number of adults in the party

        Returns:
            Rooms available on every night with enough capacity

        Raises:
            PmsRequestFailedError: If the API request fails
        """
        logger.info(
            "Fetching availability from Mews",
            service_id=service_id,
            first_time_unit_start_utc=first_time_unit_start_utc,
            last_time_unit_start_utc=last_time_unit_start_utc,
        )
        response = self.client.post(
            self.ENDPOINT,
            {
                "ServiceId": service_id,
                "FirstTimeUnitStartUtc": first_time_unit_start_utc,
                "LastTimeUnitStartUtc": last_time_unit_start_utc,
            },
        )
        return AvailabilityTransformer.transform(
            response,
            resource_categories,
            adults,
            service_id=service_id,
        )
