"""
Event system - notifications the layout builder emits while rendering.
"""

from ui_styles_layout_builder.events.dispatcher import (
    Event,
    EventDispatcher,
    EventSubscriberInterface,
    Subscription,
)
from ui_styles_layout_builder.events.render_array import (
    RenderArray,
    SectionComponentBuildRenderArrayEvent,
)

__all__ = [
    "Event",
    "EventDispatcher",
    "EventSubscriberInterface",
    "RenderArray",
    "SectionComponentBuildRenderArrayEvent",
    "Subscription",
]
