"""Tests for the availability aggregation service."""

from unittest.mock import Mock

import pytest

from src.clients import (
    AvailabilityEndpoint,
    NoBookableServicesError,
    PmsRequestFailedError,
    ResourceCategoriesEndpoint,
    ServicesEndpoint,
)
from src.models.connector import RoomAvailability
from src.models.mews import BookableService, ResourceCategory
from src.services import AvailabilityService, InvalidDateRangeError, TimeZoneService


def _service(service_id):
    return BookableService.model_validate(
        {
            "Id": service_id,
            "EnterpriseId": "property-1",
            "IsActive": True,
            "Data": {"Discriminator": "Bookable", "Value": {"TimeUnitPeriod": "Day"}},
        }
    )


def _room(category_id, name):
    return RoomAvailability(
        category_id=category_id,
        room_description=name,
        capacity=2,
        availabilities=[3, 3],
        adjustments=[0, 0],
    )


@pytest.fixture
def endpoints():
    services_endpoint = Mock(spec=ServicesEndpoint)
    services_endpoint.get_bookable_services.return_value = [_service("S1"), _service("S2")]

    categories_endpoint = Mock(spec=ResourceCategoriesEndpoint)
    categories_endpoint.get_for_services.return_value = [
        ResourceCategory(id="C1", capacity=2, name="Double"),
        ResourceCategory(id="C2", capacity=2, name="Twin"),
    ]

    availability_endpoint = Mock(spec=AvailabilityEndpoint)
    availability_endpoint.get_for_service.side_effect = lambda service_id, *args: {
        "S1": [_room("C1", "Double from S1")],
        "S2": [_room("C1", "Double from S2"), _room("C2", "Twin from S2")],
    }[service_id]

    return services_endpoint, categories_endpoint, availability_endpoint


def _build(endpoints, mews_settings):
    services_endpoint, categories_endpoint, availability_endpoint = endpoints
    return AvailabilityService(
        services_endpoint=services_endpoint,
        resource_categories_endpoint=categories_endpoint,
        availability_endpoint=availability_endpoint,
        timezone_service=TimeZoneService(mews_settings),
        mews_settings=mews_settings,
    )


class TestAvailabilityService:
    """Tests for AvailabilityService.get_availability."""

    def test_aggregates_and_deduplicates(self, endpoints, mews_settings):
        """Test that C1 from the first service wins and appears once."""
        service = _build(endpoints, mews_settings)

        response = service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)

        assert response.property_id == "property-1"
        assert response.check_in == "2024-06-01"
        assert response.check_out == "2024-06-03"
        assert response.nights == 2
        assert response.adults == 2
        assert response.currency == "EUR"
        assert [room.room_description for room in response.rooms] == [
            "Double from S1",
            "Twin from S2",
        ]
        assert all(room.price == 0.0 for room in response.rooms)
        assert all(room.currency == "EUR" for room in response.rooms)

    def test_collaborator_calls(self, endpoints, mews_settings):
        """Test that categories are fetched once and availability per service."""
        services_endpoint, categories_endpoint, availability_endpoint = endpoints
        service = _build(endpoints, mews_settings)

        service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)

        services_endpoint.get_bookable_services.assert_called_once_with("property-1")
        categories_endpoint.get_for_services.assert_called_once_with(["S1", "S2"])
        first_call = availability_endpoint.get_for_service.call_args_list[0]
        assert first_call.args[:3] == (
            "S1",
            "2024-05-31T22:00:00.000Z",
            "2024-06-01T22:00:00.000Z",
        )
        assert first_call.args[4] == 2
        assert [call.args[0] for call in availability_endpoint.get_for_service.call_args_list] == [
            "S1",
            "S2",
        ]

    def test_parallel_fetch_keeps_service_order(self, endpoints, mews_settings):
        """Test that a worker pool yields the same first-wins result."""
        mews_settings.availability_workers = 4
        service = _build(endpoints, mews_settings)

        response = service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)

        assert [room.room_description for room in response.rooms] == [
            "Double from S1",
            "Twin from S2",
        ]

    def test_category_id_not_serialized(self, endpoints, mews_settings):
        service = _build(endpoints, mews_settings)

        response = service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)
        dumped = response.model_dump()

        assert "category_id" not in dumped["rooms"][0]
        assert dumped["rooms"][0]["room_description"] == "Double from S1"

    @pytest.mark.parametrize(
        "check_in,check_out",
        [
            ("2024-06-03", "2024-06-01"),
            ("2024-06-01", "2024-06-01"),
            ("2024-06-01", "soon"),
        ],
    )
    def test_invalid_date_range(self, endpoints, mews_settings, check_in, check_out):
        """Test that non-positive nights fail before any Mews call."""
        services_endpoint = endpoints[0]
        service = _build(endpoints, mews_settings)

        with pytest.raises(InvalidDateRangeError):
            service.get_availability("property-1", check_in, check_out, 2)

        services_endpoint.get_bookable_services.assert_not_called()

    def test_no_bookable_services_propagates(self, endpoints, mews_settings):
        services_endpoint, categories_endpoint, _ = endpoints
        services_endpoint.get_bookable_services.side_effect = NoBookableServicesError("property-1")
        service = _build(endpoints, mews_settings)

        with pytest.raises(NoBookableServicesError):
            service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)

        categories_endpoint.get_for_services.assert_not_called()

    def test_service_failure_fails_whole_response(self, endpoints, mews_settings):
        """Test that one failing service aborts the aggregation."""
        availability_endpoint = endpoints[2]
        availability_endpoint.get_for_service.side_effect = PmsRequestFailedError(
            AvailabilityEndpoint.ENDPOINT, 502
        )
        service = _build(endpoints, mews_settings)

        with pytest.raises(PmsRequestFailedError):
            service.get_availability("property-1", "2024-06-01", "2024-06-03", 2)


def test_end_to_end_with_client(
    mock_client,
    mews_settings,
    property_id,
    services_response,
    resource_categories_response,
    availability_response,
):
    """Test the full pipeline over a mocked Mews client."""
    responses = {
        ServicesEndpoint.ENDPOINT: services_response,
        ResourceCategoriesEndpoint.ENDPOINT: resource_categories_response,
        AvailabilityEndpoint.ENDPOINT: availability_response,
    }
    mock_client.post.side_effect = lambda endpoint, data=None: responses[endpoint]
    service = AvailabilityService(
        services_endpoint=ServicesEndpoint(mock_client),
        resource_categories_endpoint=ResourceCategoriesEndpoint(mock_client, mews_settings),
        availability_endpoint=AvailabilityEndpoint(mock_client),
        mews_settings=mews_settings,
    )

    response = service.get_availability(property_id, "2024-06-01", "2024-06-03", 2)

    # Two bookable Day services return the same categories
    assert [room.room_description for room in response.rooms] == [
        "Double Room",
        "Chambre familiale",
    ]
    assert response.nights == 2
