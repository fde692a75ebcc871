"""Mews resource categories endpoint: room types of bookable services."""

from typing import Optional

from pydantic import ValidationError
from structlog import get_logger

from src.clients.mews_client import MewsClient
from src.config import MewsSettings, settings
from src.models.mews import ResourceCategory

logger = get_logger(__name__)


class ResourceCategoriesEndpoint:
    """Fetches resource categories, batching service ids to the API limit."""

    ENDPOINT = "/api/connector/v1/resourceCategories/getAll"

    def __init__(
        self,
        client: Optional[MewsClient] = None,
        mews_settings: Optional[MewsSettings] = None,
    ):
        config = mews_settings or settings.mews
        self.client = client or MewsClient(config)
        self.batch_size = config.category_batch_size

    def get_by_service_ids(self, service_ids: list[str]) -> list[ResourceCategory]:
        """Fetch resource categories for one batch of service ids.

        Args:
            service_ids: At most batch_size service identifiers

        Returns:
            Resource categories in the order Mews returned them

        Raises:
            PmsRequestFailedError: If the API request fails
        """
        response = self.client.post(self.ENDPOINT, {"ServiceIds": service_ids})

        categories = []
        for raw_category in (response or {}).get("ResourceCategories") or []:
            try:
                categories.append(ResourceCategory.model_validate(raw_category))
            except ValidationError as e:
                logger.warning("Skipping unparsable resource category", error=str(e))
        return categories

    def get_for_services(self, service_ids: list[str]) -> list[ResourceCategory]:
        """Fetch resource categories for any number of services.

        Service ids are split into consecutive chunks of batch_size, one
        request per chunk; results are concatenated in chunk order.

        Args:
            service_ids: Service identifiers

        Returns:
            Resource categories of all services
        """
        all_categories: list[ResourceCategory] = []
        batches = [
            service_ids[i:i + self.batch_size]
            for i in range(0, len(service_ids), self.batch_size)
        ]

        for batch_number, batch in enumerate(batches, start=1):
            categories = self.get_by_service_ids(batch)
            logger.debug(
                "Fetched resource category batch",
                batch_number=batch_number,
                total_batches=len(batches),
                service_count=len(batch),
                category_count=len(categories),
            )
            all_categories.extend(categories)

        logger.info(
            "Successfully fetched resource categories",
            service_count=len(service_ids),
            batches=len(batches),
            category_count=len(all_categories),
        )
        return all_categories
