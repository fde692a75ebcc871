"""Transformer for converting Mews category availability into room availability."""

from typing import Any

from pydantic import ValidationError
from structlog import get_logger

from src.models.connector import RoomAvailability
from src.models.mews import AvailabilityPayload, CategoryAvailability, ResourceCategory

logger = get_logger(__name__)


class AvailabilityTransformer:
    """Filters Mews category availability by stay coverage and party size."""

    @staticmethod
    def transform(
        availability: dict[str, Any] | AvailabilityPayload,
        resource_categories: list[ResourceCategory],
        adults: int,
        service_id: str | None = None,
    ) -> list[RoomAvailability]:
        """Keep categories that can host the party on every night of the stay.

        A category is dropped when any day's availability plus adjustment is
        not positive, when it cannot be resolved among resource_categories, or
        when its capacity is below adults.

        Args:
            availability: services/getAvailability response body
            resource_categories: Categories of the queried services
            adults: Number of adults in the party
            service_id: Service the availability belongs to, for logging

        Returns:
            Available rooms in the order Mews returned the categories
        """
        if isinstance(availability, AvailabilityPayload):
            raw_entries: list[Any] = availability.category_availabilities
        else:
            raw_entries = (availability or {}).get("CategoryAvailabilities") or []

        # First occurrence wins on duplicate ids
        categories_by_id = {category.id: category for category in reversed(resource_categories)}

        rooms = []
        for raw_entry in raw_entries:
            try:
                category_availability = CategoryAvailability.model_validate(raw_entry)
            except ValidationError as e:
                logger.warning(
                    "Skipping unparsable category availability",
                    service_id=service_id,
                    error=str(e),
                )
                continue

            category_id = category_availability.category_id

            if not category_availability.is_available_every_day():
                continue

            category = categories_by_id.get(category_id)
            if category is None:
                logger.debug(
                    "Availability references unknown category",
                    service_id=service_id,
                    category_id=category_id,
                )
                continue

            if category.capacity < adults:
                continue

            rooms.append(
                RoomAvailability(
                    category_id=category_id,
                    room_description=category.display_name(),
                    capacity=category.capacity,
                    availabilities=category_availability.availabilities,
                    adjustments=category_availability.adjustments,
                )
            )

        logger.debug(
            "Filtered category availability",
            service_id=service_id,
            category_count=len(raw_entries),
            available_count=len(rooms),
        )
        return rooms
