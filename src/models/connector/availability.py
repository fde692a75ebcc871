"""Pydantic models for the connector's availability response."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CURRENCY = "EUR"


class RoomAvailability(BaseModel):
    """Room category available for the whole requested stay.

    Mews does not expose nightly rates through the endpoints in use, so
    price is a 0.0 placeholder and currency is fixed.
    """

    category_id: str = Field(exclude=True, description="Used for deduplication only")
    room_description: str = Field(description="Display name of the room category")
    capacity: int = Field(description="Maximum occupants")
    availabilities: list[int] = Field(default_factory=list)
    adjustments: list[int] = Field(default_factory=list)
    price: float = Field(default=0.0, description="Total stay price placeholder")
    currency: str = Field(default=DEFAULT_CURRENCY)

    model_config = ConfigDict(populate_by_name=True)


class AvailabilityResponse(BaseModel):
    """Availability for one property and date range."""

    property_id: str
    check_in: str
    check_out: str
    nights: int
    adults: int
    currency: str = DEFAULT_CURRENCY
    rooms: list[RoomAvailability] = Field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Get number of distinct room categories available.

        Returns:
            Number of rooms in the response
        """
        return len(self.rooms)
