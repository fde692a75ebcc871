"""Availability aggregation across the bookable services of a property."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Optional

from structlog import get_logger

from src.clients import (
    AvailabilityEndpoint,
    MewsClient,
    ResourceCategoriesEndpoint,
    ServicesEndpoint,
)
from src.config import MewsSettings, settings
from src.models.connector import DEFAULT_CURRENCY, AvailabilityResponse, RoomAvailability
from src.models.mews import BookableService, ResourceCategory
from src.services.timezone_service import InvalidDateRangeError, TimeZoneService, parse_date

logger = get_logger(__name__)

# Mews exposes no nightly rate through the endpoints in use
PRICE_PER_NIGHT = 0.0


class AvailabilityService:
    """Answers "which room categories can host this party for this stay"."""

    def __init__(
        self,
        services_endpoint: Optional[ServicesEndpoint] = None,
        resource_categories_endpoint: Optional[ResourceCategoriesEndpoint] = None,
        availability_endpoint: Optional[AvailabilityEndpoint] = None,
        timezone_service: Optional[TimeZoneService] = None,
        mews_settings: Optional[MewsSettings] = None,
    ):
        """Initialize the service, building missing collaborators from settings.

        Args:
            services_endpoint: Bookable service catalog
            resource_categories_endpoint: Resource category lookup
            availability_endpoint: Per-service availability
            timezone_service: Date to UTC conversion
            mews_settings: Configuration for collaborators built here
        """
        config = mews_settings or settings.mews
        client = MewsClient(config)
        self.services_endpoint = services_endpoint or ServicesEndpoint(client)
        self.resource_categories_endpoint = (
            resource_categories_endpoint or ResourceCategoriesEndpoint(client, config)
        )
        self.availability_endpoint = availability_endpoint or AvailabilityEndpoint(client)
        self.timezone_service = timezone_service or TimeZoneService(config)
        self.max_workers = max(1, config.availability_workers)

    def get_availability(
        self,
        property_id: str,
        check_in: date | str,
        check_out: date | str,
        adults: int,
    ) -> AvailabilityResponse:
        """Get the room categories available for the whole stay.

        Args:
            property_id: Mews enterprise identifier
            check_in: Arrival date (YYYY-MM-DD)
            check_out: Departure date (YYYY-MM-DD), exclusive
            adults: Number of adults in the party

        Returns:
            AvailabilityResponse with one entry per room category

        Raises:
            InvalidDateRangeError: If check-out is not after check-in
            NoBookableServicesError: If the property has no bookable services
            PmsRequestFailedError: If a Mews request fails
        """
        check_in_date = parse_date(check_in, check_in, check_out)
        check_out_date = parse_date(check_out, check_in, check_out)
        nights = (check_out_date - check_in_date).days
        if nights <= 0:
            raise InvalidDateRangeError(
                check_in, check_out, "Check-out must be after check-in"
            )

        logger.info(
            "Getting availability",
            property_id=property_id,
            check_in=check_in_date.isoformat(),
            check_out=check_out_date.isoformat(),
            nights=nights,
            adults=adults,
        )

        bookable_services = self.services_endpoint.get_bookable_services(property_id)
        resource_categories = self.resource_categories_endpoint.get_for_services(
            [service.id for service in bookable_services]
        )

        rooms = self._process_services_availability(
            bookable_services,
            resource_categories,
            check_in_date,
            check_out_date,
            adults,
            nights,
        )

        response = AvailabilityResponse(
            property_id=property_id,
            check_in=check_in_date.isoformat(),
            check_out=check_out_date.isoformat(),
            nights=nights,
            adults=adults,
            currency=DEFAULT_CURRENCY,
            rooms=rooms,
        )
        logger.info(
            "Availability ready",
            property_id=property_id,
            service_count=len(bookable_services),
            room_count=response.total_count,
        )
        return response

    def _fetch_service_availability(
        self,
        service: BookableService,
        resource_categories: list[ResourceCategory],
        check_in: date,
        check_out: date,
        adults: int,
    ) -> list[RoomAvailability]:
        utc_times = self.timezone_service.convert_dates_for_availability(check_in, check_out)
        return self.availability_endpoint.get_for_service(
            service.id,
            utc_times["firstTimeUnitStartUtc"],
            utc_times["lastTimeUnitStartUtc"],
            resource_categories,
            adults,
        )

    def _process_services_availability(
        self,
        services: list[BookableService],
        resource_categories: list[ResourceCategory],
        check_in: date,
        check_out: date,
        adults: int,
        nights: int,
    ) -> list[RoomAvailability]:
        """Fetch availability of every service and merge the results.

        Per-service results are merged in service order whether or not they
        were fetched concurrently, so the first service offering a category wins.

        Returns:
            Rooms deduplicated by category id
        """
        def fetch(service: BookableService) -> list[RoomAvailability]:
            return self._fetch_service_availability(
                service, resource_categories, check_in, check_out, adults
            )

        if self.max_workers > 1 and len(services) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                per_service = list(executor.map(fetch, services))
        else:
            per_service = [fetch(service) for service in services]

        return self._build_rooms(per_service, nights)

    @staticmethod
    def _build_rooms(
        per_service: list[list[RoomAvailability]],
        nights: int,
    ) -> list[RoomAvailability]:
        """Deduplicate rooms by category id and attach the price placeholder.

        Args:
            per_service: Available rooms of each service, in service order
            nights: Number of nights of the stay

        Returns:
            First occurrence of every category, in encounter order
        """
        unique_rooms: dict[str, RoomAvailability] = {}
        for rooms in per_service:
            for room in rooms:
                if room.category_id in unique_rooms:
                    continue
                unique_rooms[room.category_id] = room.model_copy(
                    update={
                        "price": round(PRICE_PER_NIGHT * nights, 2),
                        "currency": DEFAULT_CURRENCY,
                    }
                )
        return list(unique_rooms.values())
