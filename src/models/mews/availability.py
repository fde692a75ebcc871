"""Pydantic models for Mews services/getAvailability responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryAvailability(BaseModel):
    """Per-day availability of one resource category within a service.

    Availabilities and Adjustments are index-aligned by time unit (day).
    Adjustments may be shorter than Availabilities; missing entries count as 0.
    """

    category_id: str = Field(alias="CategoryId")
    availabilities: list[int] = Field(default_factory=list, alias="Availabilities")
    adjustments: list[int] = Field(default_factory=list, alias="Adjustments")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("availabilities", "adjustments", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Treat null arrays as empty."""
        return [] if v is None else v

    def effective_availabilities(self) -> list[int]:
        """Availability per day with its adjustment applied."""
        return [
            available + (self.adjustments[i] if i < len(self.adjustments) else 0)
            for i, available in enumerate(self.availabilities)
        ]

    def is_available_every_day(self) -> bool:
        """True when every day of the range has at least one unit left."""
        return all(count > 0 for count in self.effective_availabilities())


class AvailabilityPayload(BaseModel):
    """Response body of services/getAvailability."""

    category_availabilities: list[CategoryAvailability] = Field(
        default_factory=list, alias="CategoryAvailabilities"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("category_availabilities", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
