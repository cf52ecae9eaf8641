"""
Style models - reusable bundles of CSS utility classes.

A style groups mutually exclusive class options (for example every
text alignment class) under one id, so a site builder picks at most
one option per style.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StyleDefinition(BaseModel):
    """A style plugin definition."""

    id: str = Field(..., description="Style ID")
    label: str = Field("", description="Human readable label")
    description: str = Field("", description="Style description")
    category: str = Field("", description="Grouping category")
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Map of CSS class to option label",
    )
    previewed_with: list[str] = Field(
        default_factory=list,
        description="Classes added when previewing an option",
    )
    weight: int = Field(0, description="Ordering weight")
    enabled: bool = Field(True, description="Whether the style is offered")

    model_config = {"frozen": True}

    def has_option(self, css_class: str) -> bool:
        """Check if a CSS class is one of this style's options."""
        return css_class in self.options


class StyleMetadata(BaseModel):
    """Lightweight metadata for listing styles."""

    id: str
    label: str
    category: str
    option_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_style(cls, style: StyleDefinition) -> StyleMetadata:
        """Create metadata from a style."""
        return cls(
            id=style.id,
            label=style.label or style.id,
            category=style.category,
            option_count=len(style.options),
        )
