"""
Constants and enums for the layout builder styles integration.

No magic strings - use enums and named constants for event names,
priorities and configuration keys.
"""

from enum import Enum


class LayoutBuilderEvents(str, Enum):
    """Events dispatched by the layout builder."""

    SECTION_COMPONENT_BUILD_RENDER_ARRAY = "section_component.build.render_array"
    PREPARE_LAYOUT = "prepare_layout"


# Listener priorities (higher runs first)
DEFAULT_BUILDER_PRIORITY = 100
UI_STYLES_PRIORITY = 50

# Component configuration keys
UI_STYLES_KEY = "ui_styles"
UI_STYLES_EXTRA_KEY = "ui_styles_extra"

# Render array property for HTML attributes
ATTRIBUTES_KEY = "#attributes"


class ErrorMessages:
    """Standardized error messages."""

    NO_PROJECT_PATH = "No project path configured"
    STYLE_EXISTS = "Style already exists in project: {style_id}"
    UNKNOWN_EVENT = "Unknown event: '{event_name}'."
    MISSING_METHOD = "Subscriber {subscriber} has no method '{method}'."
    COMPONENT_NOT_FOUND = "Component file not found: {path}"
    INVALID_COMPONENT = "Invalid component file {path}: {error}"
