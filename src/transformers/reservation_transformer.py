"""Transformer for converting Mews reservations to the connector format."""

from datetime import date, datetime
from typing import Any, Optional

from structlog import get_logger

from src.models.connector import ReservationItem
from src.models.mews import (
    Customer,
    MewsReservation,
    ReservationsPayload,
    Resource,
    ResourceCategory,
)
from src.models.mews.resource_category import UNKNOWN_NAME
from src.models.reservation_status import ReservationStatusMapper

logger = get_logger(__name__)

DEFAULT_BOOKING_CHANNEL = "Direct"


class ReservationTransformer:
    """Transforms Mews reservations/getAll payloads to connector reservations."""

    @staticmethod
    def _index_by_id(items: list[Any]) -> dict[str, dict[str, Any]]:
        """Index raw entities by their Id; later duplicates overwrite earlier ones.

        Args:
            items: Raw entities from the payload

        Returns:
            Dictionary keyed by Id, entries without Id are left out
        """
        indexed = {}
        for item in items:
            if isinstance(item, dict) and item.get("Id") is not None:
                indexed[item["Id"]] = item
        return indexed

    @staticmethod
    def _get_date_string(utc_value: Optional[str]) -> str:
        """Convert a UTC timestamp to an ISO calendar date (YYYY-MM-DD).

        Args:
            utc_value: Timestamp such as "2024-06-01T22:00:00Z"

        Returns:
            Calendar date, or an empty string when missing or unparsable
        """
        if not utc_value:
            return ""
        try:
            return datetime.fromisoformat(utc_value.replace("Z", "+00:00")).date().isoformat()
        except ValueError:
            pass
        # Longer fractional seconds than fromisoformat accepts
        try:
            return date.fromisoformat(utc_value[:10]).isoformat()
        except ValueError:
            return ""

    @staticmethod
    def transform(
        reservation: dict[str, Any] | MewsReservation,
        customers: dict[str, dict[str, Any]],
        resources: dict[str, dict[str, Any]],
        resource_categories: dict[str, dict[str, Any]],
        services: dict[str, dict[str, Any]],
    ) -> Optional[ReservationItem]:
        """Transform a single Mews reservation using the indexed related entities.

        Args:
            reservation: Reservation from Mews
            customers: Customers indexed by Id
            resources: Resources indexed by Id
            resource_categories: Resource categories indexed by Id
            services: Services indexed by Id

        Returns:
            ReservationItem, or None when the customer is unknown
        """
        if not isinstance(reservation, MewsReservation):
            reservation = MewsReservation.model_validate(reservation)

        raw_customer = customers.get(reservation.customer_id) if reservation.customer_id else None
        if not raw_customer:
            logger.debug(
                "Skipping reservation without customer",
                reservation_id=reservation.id,
                customer_id=reservation.customer_id,
            )
            return None
        customer = Customer.model_validate(raw_customer)

        resource = None
        if reservation.assigned_resource_id and reservation.assigned_resource_id in resources:
            resource = Resource.model_validate(resources[reservation.assigned_resource_id])

        category_name = UNKNOWN_NAME
        raw_category = resource_categories.get(reservation.requested_category_id)
        if raw_category:
            category_name = ResourceCategory.model_validate(raw_category).display_name(
                any_language=False
            )

        service = services.get(reservation.service_id) or {}

        return ReservationItem(
            reservation_id=reservation.id,
            status=ReservationStatusMapper.map_state_to_status(reservation.state).value,
            first_name=customer.first_name or "",
            last_name=customer.last_name or "",
            email=customer.email or "",
            phone_number=customer.phone or "",
            booking_channel=reservation.origin or DEFAULT_BOOKING_CHANNEL,
            room_state=ReservationStatusMapper.map_room_state(
                reservation.state,
                resource.state if resource else None,
                has_resource=resource is not None,
            ).value,
            room_number=resource.name if resource else None,
            room_type=service.get("Name") or UNKNOWN_NAME,
            room_category=category_name,
            check_in=ReservationTransformer._get_date_string(reservation.start_utc),
            check_out=ReservationTransformer._get_date_string(reservation.end_utc),
        )

    @staticmethod
    def transform_all(
        payload: dict[str, Any] | ReservationsPayload,
        property_id: Optional[str] = None,
    ) -> list[ReservationItem]:
        """Transform every reservation in a reservations/getAll payload.

        Reservations without a known customer are left out. A reservation that
        fails to transform is logged and skipped; it never aborts the batch.

        Args:
            payload: Raw reservations/getAll response
            property_id: Property identifier for logging context

        Returns:
            Reservations in payload order
        """
        if not isinstance(payload, ReservationsPayload):
            payload = ReservationsPayload.model_validate(payload or {})

        customers = ReservationTransformer._index_by_id(payload.customers)
        resources = ReservationTransformer._index_by_id(payload.resources)
        resource_categories = ReservationTransformer._index_by_id(payload.resource_categories)
        services = ReservationTransformer._index_by_id(payload.services)

        items = []
        skipped = 0
        for raw_reservation in payload.reservations:
            try:
                item = ReservationTransformer.transform(
                    raw_reservation,
                    customers,
                    resources,
                    resource_categories,
                    services,
                )
            except Exception as e:
                logger.warning(
                    "Failed to transform reservation",
                    property_id=property_id,
                    reservation_id=raw_reservation.get("Id") if isinstance(raw_reservation, dict) else None,
                    error=str(e),
                )
                skipped += 1
                continue

            if item is None:
                skipped += 1
                continue
            items.append(item)

        logger.info(
            "Transformed reservations",
            property_id=property_id,
            reservation_count=len(payload.reservations),
            transformed_count=len(items),
            skipped_count=skipped,
        )
        return items
