"""Pydantic models for Mews services/getAll responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceData(BaseModel):
    """Discriminated service payload (Bookable, Additional, ...)."""

    discriminator: Optional[str] = Field(None, alias="Discriminator")
    value: Optional[dict[str, Any]] = Field(None, alias="Value")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class BookableService(BaseModel):
    """Service offered by an enterprise in Mews."""

    id: str = Field(alias="Id")
    enterprise_id: Optional[str] = Field(None, alias="EnterpriseId")
    is_active: Optional[bool] = Field(None, alias="IsActive")
    name: Optional[str] = Field(None, alias="Name")
    data: Optional[ServiceData] = Field(None, alias="Data")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def discriminator(self) -> Optional[str]:
        return self.data.discriminator if self.data else None

    @property
    def time_unit_period(self) -> Optional[str]:
        if self.data is None or not self.data.value:
            return None
        return self.data.value.get("TimeUnitPeriod")

    def is_bookable_day_service_for(self, property_id: str) -> bool:
        """Check whether the service is an active, Day-based bookable service of the property.

        Args:
            property_id: Enterprise or service identifier requested by the caller

        Returns:
            True if the service is in scope for availability queries
        """
        return (
            self.discriminator == "Bookable"
            and (self.id == property_id or self.enterprise_id == property_id)
            and self.is_active is True
            and self.time_unit_period == "Day"
        )
