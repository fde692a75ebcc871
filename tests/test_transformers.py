"""Unit tests for data transformers."""

from src.models.mews import ResourceCategory
from src.transformers import AvailabilityTransformer, ReservationTransformer


def _categories(*raw):
    return [ResourceCategory.model_validate(category) for category in raw]


class TestAvailabilityTransformer:
    """Tests for AvailabilityTransformer."""

    def test_negative_adjustment_excludes_category(self):
        """Test that availability=[5,5], adjustment=[0,-6] excludes the category."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C1", "Availabilities": [5, 5], "Adjustments": [0, -6]},
            ]
        }

        rooms = AvailabilityTransformer.transform(
            availability, _categories({"Id": "C1", "Capacity": 2, "Name": "Double"}), 1
        )

        assert rooms == []

    def test_malformed_entry_is_skipped(self):
        """Test that a null day count or missing CategoryId drops only that entry."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C1", "Availabilities": [3, None], "Adjustments": [0, 0]},
                {"Availabilities": [3, 3]},
                {"CategoryId": "C2", "Availabilities": [3, 3], "Adjustments": [0, 0]},
            ]
        }

        rooms = AvailabilityTransformer.transform(
            availability,
            _categories(
                {"Id": "C1", "Capacity": 2, "Name": "Double"},
                {"Id": "C2", "Capacity": 2, "Name": "Twin"},
            ),
            1,
        )

        assert [room.category_id for room in rooms] == ["C2"]

    def test_zero_effective_availability_excludes_category(self):
        """Test that a single sold-out day excludes the whole category."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C1", "Availabilities": [3, 1, 3], "Adjustments": [0, -1, 0]},
            ]
        }

        rooms = AvailabilityTransformer.transform(
            availability, _categories({"Id": "C1", "Capacity": 2, "Name": "Double"}), 1
        )

        assert rooms == []

    def test_short_adjustments_count_as_zero(self):
        """Test that missing adjustment entries are treated as 0."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C1", "Availabilities": [1, 1, 1], "Adjustments": [1]},
            ]
        }

        rooms = AvailabilityTransformer.transform(
            availability, _categories({"Id": "C1", "Capacity": 2, "Name": "Double"}), 2
        )

        assert len(rooms) == 1
        assert rooms[0].availabilities == [1, 1, 1]
        assert rooms[0].adjustments == [1]

    def test_capacity_filter(self):
        """Test that capacity 2 is excluded for 3 adults and included for 2."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C1", "Availabilities": [4], "Adjustments": [0]},
            ]
        }
        categories = _categories({"Id": "C1", "Capacity": 2, "Name": "Double"})

        assert AvailabilityTransformer.transform(availability, categories, 3) == []
        rooms = AvailabilityTransformer.transform(availability, categories, 2)
        assert [room.capacity for room in rooms] == [2]

    def test_unknown_category_excluded(self):
        """Test that availability for an unresolvable category is dropped."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": "C404", "Availabilities": [4], "Adjustments": [0]},
            ]
        }

        rooms = AvailabilityTransformer.transform(
            availability, _categories({"Id": "C1", "Capacity": 2}), 1
        )

        assert rooms == []

    def test_name_fallback_order(self):
        """Test en-US, then Name, then first language, then Unknown."""
        availability = {
            "CategoryAvailabilities": [
                {"CategoryId": cid, "Availabilities": [1], "Adjustments": [0]}
                for cid in ("C1", "C2", "C3", "C4")
            ]
        }
        categories = _categories(
            {"Id": "C1", "Capacity": 2, "Names": {"en-US": "Double", "de-DE": "Doppel"}, "Name": "Plain"},
            {"Id": "C2", "Capacity": 2, "Names": {"de-DE": "Doppel"}, "Name": "Plain"},
            {"Id": "C3", "Capacity": 2, "Names": {"fr-FR": "Chambre"}},
            {"Id": "C4", "Capacity": 2},
        )

        rooms = AvailabilityTransformer.transform(availability, categories, 1)

        assert [room.room_description for room in rooms] == [
            "Double",
            "Plain",
            "Chambre",
            "Unknown",
        ]

    def test_first_language_is_deterministic(self):
        """Test that the language fallback picks the lexicographically first tag."""
        category = ResourceCategory.model_validate(
            {"Id": "C1", "Names": {"hu-HU": "Szoba", "de-DE": "Zimmer", "fr-FR": "Chambre"}}
        )

        assert category.display_name() == "Zimmer"
        assert category.display_name(any_language=False) == "Unknown"

    def test_fixture_response(self, availability_response, resource_categories_response):
        """Test filtering a realistic availability response."""
        categories = _categories(*resource_categories_response["ResourceCategories"])

        rooms = AvailabilityTransformer.transform(availability_response, categories, 1)

        assert [room.category_id for room in rooms] == ["cat-double", "cat-single", "cat-family"]
        assert rooms[0].room_description == "Double Room"

    def test_empty_response(self):
        """Test that a response without CategoryAvailabilities yields no rooms."""
        assert AvailabilityTransformer.transform({}, [], 1) == []
        assert AvailabilityTransformer.transform({"CategoryAvailabilities": None}, [], 1) == []


class TestReservationTransformer:
    """Tests for ReservationTransformer."""

    def test_transform_fixture_payload(self, reservations_response):
        """Test mapping a realistic payload."""
        items = ReservationTransformer.transform_all(reservations_response)

        # res-3 has no matching customer
        assert [item.reservation_id for item in items] == ["res-1", "res-2", "res-4"]

        confirmed = items[0]
        assert confirmed.status == "confirmed"
        assert confirmed.first_name == "Anna"
        assert confirmed.last_name == "Kovacs"
        assert confirmed.email == "anna@example.com"
        assert confirmed.phone_number == "+36 1 234 5678"
        assert confirmed.booking_channel == "Connector"
        assert confirmed.room_state == "assigned"
        assert confirmed.room_number == "101"
        assert confirmed.room_type == "Accommodation"
        assert confirmed.room_category == "Double Room"
        assert confirmed.check_in == "2024-06-01"
        assert confirmed.check_out == "2024-06-03"

    def test_started_overrides_resource_state(self, reservations_response):
        """Test that a Started reservation in an OutOfService room is checked-in."""
        items = ReservationTransformer.transform_all(reservations_response)

        started = items[1]
        assert started.status == "confirmed"
        assert started.room_state == "checked-in"
        assert started.room_number == "102"
        assert started.room_category == "Suite"
        assert started.booking_channel == "Direct"
        assert started.email == ""
        assert started.check_in == "2024-06-02"
        assert started.check_out == "2024-06-05"

    def test_unassigned_and_defaults(self, reservations_response):
        """Test the cancelled reservation without resource, service or valid dates."""
        items = ReservationTransformer.transform_all(reservations_response)

        cancelled = items[2]
        assert cancelled.status == "cancelled"
        assert cancelled.room_state == "unassigned"
        assert cancelled.room_number is None
        assert cancelled.room_type == "Unknown"
        # No iteration over other languages for reservations
        assert cancelled.room_category == "Unknown"
        assert cancelled.check_in == ""
        assert cancelled.check_out == ""

    def test_missing_customer_is_omitted(self):
        """Test that a reservation without customer entry is dropped, others kept."""
        payload = {
            "Reservations": [
                {"Id": "r-1", "CustomerId": "ghost", "State": "Confirmed"},
                {"Id": "r-2", "CustomerId": "c-1", "State": "Confirmed"},
            ],
            "Customers": [{"Id": "c-1", "FirstName": "Eva"}],
        }

        items = ReservationTransformer.transform_all(payload)

        assert [item.reservation_id for item in items] == ["r-2"]

    def test_malformed_reservation_is_skipped(self):
        """Test that a reservation failing to parse does not abort the batch."""
        payload = {
            "Reservations": [
                {"CustomerId": "c-1", "State": "Confirmed"},
                "not-a-reservation",
                {"Id": "r-2", "CustomerId": "c-1", "State": "Optional"},
            ],
            "Customers": [{"Id": "c-1", "FirstName": "Eva"}],
        }

        items = ReservationTransformer.transform_all(payload)

        assert [item.reservation_id for item in items] == ["r-2"]
        assert items[0].status == "pending"

    def test_later_duplicate_entities_win(self):
        """Test that the last entity with a given Id is used."""
        payload = {
            "Reservations": [{"Id": "r-1", "CustomerId": "c-1", "AssignedResourceId": "room-1"}],
            "Customers": [
                {"Id": "c-1", "FirstName": "Old"},
                {"Id": "c-1", "FirstName": "New"},
            ],
            "Resources": [
                {"Id": "room-1", "Name": "1", "State": "Dirty"},
                {"Id": "room-1", "Name": "1", "State": "Inspected"},
            ],
        }

        items = ReservationTransformer.transform_all(payload)

        assert items[0].first_name == "New"
        assert items[0].room_state == "assigned"
        # Missing state defaults to Confirmed
        assert items[0].status == "confirmed"

    def test_unknown_states_default(self):
        """Test defaults for unknown reservation and resource states."""
        payload = {
            "Reservations": [
                {"Id": "r-1", "CustomerId": "c-1", "State": "Enquired", "AssignedResourceId": "room-1"},
            ],
            "Customers": [{"Id": "c-1"}],
            "Resources": [{"Id": "room-1", "Name": "1", "State": "Renovating"}],
        }

        items = ReservationTransformer.transform_all(payload)

        assert items[0].status == "confirmed"
        assert items[0].room_state == "assigned"

    def test_empty_payload(self):
        """Test that an empty payload yields no reservations."""
        assert ReservationTransformer.transform_all({}) == []

    def test_date_string(self):
        """Test calendar date extraction from UTC timestamps."""
        assert ReservationTransformer._get_date_string("2024-06-01T22:00:00Z") == "2024-06-01"
        assert ReservationTransformer._get_date_string("2024-06-01T22:00:00.1234567Z") == "2024-06-01"
        assert ReservationTransformer._get_date_string("") == ""
        assert ReservationTransformer._get_date_string(None) == ""
        assert ReservationTransformer._get_date_string("yesterday") == ""
