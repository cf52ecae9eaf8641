"""
Block component styles subscriber.

Adds each component's selected styles and extra classes to its render
array once the layout builder has built it.
"""

from __future__ import annotations

from collections.abc import Mapping

from ui_styles_layout_builder.constants import (
    UI_STYLES_EXTRA_KEY,
    UI_STYLES_KEY,
    UI_STYLES_PRIORITY,
    LayoutBuilderEvents,
)
from ui_styles_layout_builder.events import SectionComponentBuildRenderArrayEvent, Subscription
from ui_styles_layout_builder.models.component import SectionComponent
from ui_styles_layout_builder.styles.manager import StylePluginManagerInterface


def get_selected_styles(component: SectionComponent) -> list[str]:
    """
    Get the style options selected for a component.

    Selections stored as a mapping of style id to option contribute
    their options in order. A single option string counts as one
    selection. Unset selections give an empty list.
    """
    selected = component.get(UI_STYLES_KEY) or []
    if isinstance(selected, str):
        selected = [selected]
    elif isinstance(selected, Mapping):
        selected = selected.values()
    return [str(option) for option in selected if option]


def get_extra_classes(component: SectionComponent) -> str:
    """Get the free-text extra classes of a component ("" when unset)."""
    extra = component.get(UI_STYLES_EXTRA_KEY) or ""
    if isinstance(extra, (list, tuple)):
        return " ".join(str(css_class) for css_class in extra if css_class)
    return str(extra)


class BlockComponentRenderArraySubscriber:
    """
    Applies style classes to block component render arrays.

    The layout builder builds the initial render array at a higher
    priority, so this subscriber only ever decorates an existing build.
    """

    def __init__(self, style_manager: StylePluginManagerInterface):
        """
        Initialize the subscriber.

        Args:
            style_manager: Service that merges classes into render arrays
        """
        self.style_manager = style_manager

    def get_subscribed_events(self) -> list[Subscription]:
        return [
            Subscription(
                event=LayoutBuilderEvents.SECTION_COMPONENT_BUILD_RENDER_ARRAY,
                method="on_build_render",
                priority=UI_STYLES_PRIORITY,
            )
        ]

    def on_build_render(self, event: SectionComponentBuildRenderArrayEvent) -> None:
        """
        Add the component's block styles to the render array.

        Args:
            event: The section component render event
        """
        build = event.get_build()
        # The layout builder should already have built this
        if not build:
            return

        component = event.get_component()
        selected = get_selected_styles(component)
        extra = get_extra_classes(component)
        build = self.style_manager.add_classes(build, selected, extra)
        event.set_build(build)
