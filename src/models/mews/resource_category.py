"""Pydantic models for Mews resource categories (room types)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LANGUAGE = "en-US"
UNKNOWN_NAME = "Unknown"


class ResourceCategory(BaseModel):
    """Room category with its maximum occupancy and localized names."""

    id: str = Field(alias="Id")
    service_id: Optional[str] = Field(None, alias="ServiceId")
    capacity: int = Field(default=0, alias="Capacity")
    names: Optional[dict[str, str]] = Field(None, alias="Names")
    name: Optional[str] = Field(None, alias="Name")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def display_name(self, any_language: bool = True) -> str:
        """Resolve the category name shown to consumers.

        Order: en-US localized name, plain Name, then (when any_language is set)
        the first localized name by language tag, else "Unknown".

        Args:
            any_language: Fall back to any available language before "Unknown"

        Returns:
            Display name of the category
        """
        names = self.names or {}
        if names.get(DEFAULT_LANGUAGE) is not None:
            return names[DEFAULT_LANGUAGE]
        if self.name is not None:
            return self.name
        if any_language and names:
            return names[sorted(names)[0]]
        return UNKNOWN_NAME
