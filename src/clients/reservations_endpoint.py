"""Mews reservations endpoint."""

from typing import Any, Optional

from structlog import get_logger

from src.clients.mews_client import MewsClient

logger = get_logger(__name__)


class ReservationsEndpoint:
    """Fetches reservations together with their related entities."""

    ENDPOINT = "/api/connector/v1/reservations/getAll"

    def __init__(self, client: Optional[MewsClient] = None):
        self.client = client or MewsClient()

    def get_all(
        self,
        enterprise_id: str,
        states: list[str],
        start_utc: str,
        end_utc: str,
    ) -> dict[str, Any]:
        """Fetch reservations of a property within a UTC interval.

        Args:
            enterprise_id: Mews enterprise (property) identifier
            states: Mews reservation states to include (e.g., ["Confirmed"])
            start_utc: Interval start (e.g., "2024-06-01T00:00:00Z")
            end_utc: Interval end

        Returns:
            Raw response with Reservations, Customers, Resources,
            ResourceCategories and Services

        Raises:
            PmsRequestFailedError: If the API request fails
        """
        logger.info(
            "Fetching reservations from Mews",
            property_id=enterprise_id,
            states=states,
            start_utc=start_utc,
            end_utc=end_utc,
        )
        response = self.client.post(
            self.ENDPOINT,
            {
                "EnterpriseIds": [enterprise_id],
                "States": states,
                "StartUtc": start_utc,
                "EndUtc": end_utc,
            },
        )
        return response or {}
