"""Reservation retrieval and mapping for a property."""

from datetime import date
from typing import Any, Optional

from structlog import get_logger

from src.clients import MewsClient, ReservationsEndpoint
from src.config import MewsSettings, settings
from src.models.connector import ReservationItem, ReservationResponse
from src.models.reservation_status import ReservationStatusMapper
from src.services.timezone_service import InvalidDateRangeError, TimeZoneService, parse_date
from src.transformers.reservation_transformer import ReservationTransformer

logger = get_logger(__name__)


class ReservationService:
    """Fetches Mews reservations and maps them to the connector format."""

    def __init__(
        self,
        reservations_endpoint: Optional[ReservationsEndpoint] = None,
        timezone_service: Optional[TimeZoneService] = None,
        mews_settings: Optional[MewsSettings] = None,
    ):
        config = mews_settings or settings.mews
        self.reservations_endpoint = reservations_endpoint or ReservationsEndpoint(
            MewsClient(config)
        )
        self.timezone_service = timezone_service or TimeZoneService(config)

    def get_reservations(
        self,
        property_id: str,
        check_in: date | str,
        check_out: Optional[date | str] = None,
        status: Optional[str] = None,
    ) -> ReservationResponse:
        """Get the reservations of a property for a date interval.

        Args:
            property_id: Mews enterprise identifier
            check_in: Interval start (YYYY-MM-DD)
            check_out: Optional interval end; one year after check-in when omitted
            status: Optional filter: confirmed, pending or cancelled

        Returns:
            ReservationResponse with the mapped reservations

        Raises:
            InvalidDateRangeError: If check-out is given and not after check-in
            PmsRequestFailedError: If the Mews request fails
        """
        check_in_date = parse_date(check_in, check_in, check_out)
        check_out_date = parse_date(check_out, check_in, check_out) if check_out else None
        if check_out_date is not None and check_out_date <= check_in_date:
            raise InvalidDateRangeError(
                check_in, check_out, "Check-out must be after check-in"
            )

        mews_states = ReservationStatusMapper.map_status_filter_to_states(status)
        utc_dates = self.timezone_service.convert_dates_for_reservations(
            check_in_date, check_out_date
        )

        logger.info(
            "Getting reservations",
            property_id=property_id,
            states=mews_states,
            start_utc=utc_dates["startUtc"],
            end_utc=utc_dates["endUtc"],
        )
        payload = self.reservations_endpoint.get_all(
            property_id,
            mews_states,
            utc_dates["startUtc"],
            utc_dates["endUtc"],
        )

        return ReservationResponse(
            property_id=property_id,
            check_in=check_in_date.isoformat(),
            check_out=check_out_date.isoformat() if check_out_date else None,
            status=status,
            reservations=self.map_reservations(payload, property_id),
        )

    @staticmethod
    def map_reservations(
        payload: dict[str, Any],
        property_id: Optional[str] = None,
    ) -> list[ReservationItem]:
        """Map a raw reservations/getAll payload; malformed reservations are skipped."""
        return ReservationTransformer.transform_all(payload, property_id=property_id)
