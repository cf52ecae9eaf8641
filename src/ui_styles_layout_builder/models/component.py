"""
Section component model - one block placed in a layout section.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SectionComponent(BaseModel):
    """
    A block placed within a layout section.

    Named properties (uuid, region, weight, configuration) are looked up
    first by get(); anything else comes from the free-form additional
    settings, which is where third-party modules keep their values.
    """

    uuid: str = Field(..., description="Component UUID")
    region: str = Field("content", description="Region within the section")
    weight: int = Field(0, description="Ordering weight within the region")
    configuration: dict[str, Any] = Field(
        default_factory=dict,
        description="Block plugin configuration (must include 'id')",
    )
    additional: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional third-party settings",
    )

    def get(self, name: str) -> Any:
        """
        Get a property or additional setting.

        Args:
            name: Property or setting name

        Returns:
            The value, or None if not set
        """
        if name in type(self).model_fields:
            return getattr(self, name)
        return self.additional.get(name)

    def set(self, name: str, value: Any) -> SectionComponent:
        """
        Set a property or additional setting.

        Args:
            name: Property or setting name
            value: New value

        Returns:
            The component, for chaining
        """
        if name in type(self).model_fields:
            setattr(self, name, value)
        else:
            self.additional[name] = value
        return self

    def get_plugin_id(self) -> str:
        """Get the block plugin ID from the configuration."""
        return str(self.configuration.get("id", ""))
