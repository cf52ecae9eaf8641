"""
Pydantic models for the layout builder styles integration.

This module provides:
- SectionComponent: A block placed in a layout section
- StyleDefinition: A bundle of CSS class options
- StyleMetadata: Lightweight listing data for a style
"""

from ui_styles_layout_builder.models.component import SectionComponent
from ui_styles_layout_builder.models.style import StyleDefinition, StyleMetadata

__all__ = [
    "SectionComponent",
    "StyleDefinition",
    "StyleMetadata",
]
