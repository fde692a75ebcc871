"""Pydantic models for Mews reservations/getAll responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MewsReservation(BaseModel):
    """Reservation as returned by Mews."""

    id: str = Field(alias="Id")
    customer_id: Optional[str] = Field(None, alias="CustomerId")
    assigned_resource_id: Optional[str] = Field(None, alias="AssignedResourceId")
    requested_category_id: Optional[str] = Field(None, alias="RequestedCategoryId")
    service_id: Optional[str] = Field(None, alias="ServiceId")
    state: str = Field(default="Confirmed", alias="State")
    origin: Optional[str] = Field(None, alias="Origin")
    start_utc: Optional[str] = Field(None, alias="StartUtc")
    end_utc: Optional[str] = Field(None, alias="EndUtc")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("state", mode="before")
    @classmethod
    def default_state(cls, v: Any) -> Any:
        """Missing state is read as Confirmed."""
        return "Confirmed" if v is None else v


class Customer(BaseModel):
    """Guest profile attached to a reservation."""

    id: str = Field(alias="Id")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    email: Optional[str] = Field(None, alias="Email")
    phone: Optional[str] = Field(None, alias="Phone")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Resource(BaseModel):
    """Physical room (space) with its housekeeping state."""

    id: str = Field(alias="Id")
    name: Optional[str] = Field(None, alias="Name")
    state: Optional[str] = Field(None, alias="State")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ReservationsPayload(BaseModel):
    """Response body of reservations/getAll.

    Related entities are kept as raw dicts so that one malformed entry
    only affects the reservations that reference it.
    """

    reservations: list[Any] = Field(default_factory=list, alias="Reservations")
    customers: list[Any] = Field(default_factory=list, alias="Customers")
    resources: list[Any] = Field(default_factory=list, alias="Resources")
    resource_categories: list[Any] = Field(
        default_factory=list, alias="ResourceCategories"
    )
    services: list[Any] = Field(default_factory=list, alias="Services")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator(
        "reservations", "customers", "resources", "resource_categories", "services",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
