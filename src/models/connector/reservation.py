"""Pydantic models for the connector's reservation response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReservationItem(BaseModel):
    """Reservation in the connector's simplified format."""

    reservation_id: str
    status: str = Field(description="confirmed, pending or cancelled")
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    booking_channel: str = "Direct"
    room_state: str = Field(description="unassigned, assigned or checked-in")
    room_number: Optional[str] = None
    room_type: str = "Unknown"
    room_category: str = "Unknown"
    check_in: str = Field(description="Calendar date (YYYY-MM-DD) or empty")
    check_out: str = Field(description="Calendar date (YYYY-MM-DD) or empty")

    model_config = ConfigDict(extra="forbid")


class ReservationResponse(BaseModel):
    """Reservations for one property and date range."""

    property_id: str
    check_in: str
    check_out: Optional[str] = None
    status: Optional[str] = None
    reservations: list[ReservationItem] = Field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.reservations)
