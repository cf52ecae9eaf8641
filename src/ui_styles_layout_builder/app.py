"""
Application wiring for section component rendering.

Creates the style services and an event dispatcher with the layout
builder subscribers registered.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ui_styles_layout_builder.constants import LayoutBuilderEvents
from ui_styles_layout_builder.events import (
    EventDispatcher,
    RenderArray,
    SectionComponentBuildRenderArrayEvent,
)
from ui_styles_layout_builder.models.component import SectionComponent
from ui_styles_layout_builder.styles import StyleLoader, StylePluginManager, StylePluginManagerInterface
from ui_styles_layout_builder.subscribers import (
    BlockComponentRenderArray,
    BlockComponentRenderArraySubscriber,
)

logger = logging.getLogger(__name__)

# Paths - use standard project structure
BASE_PATH = Path.cwd()
STYLES_DIR = BASE_PATH / "styles"
STYLES_LIBRARY_PATH = Path(__file__).parent / "styles" / "library"


def create_style_manager(styles_dir: Path | None = None) -> StylePluginManager:
    """
    Create a style manager over the library and project styles.

    Args:
        styles_dir: Project styles directory (defaults to ./styles)
    """
    loader = StyleLoader(
        library_path=STYLES_LIBRARY_PATH,
        project_path=styles_dir or STYLES_DIR,
    )
    logger.info(f"Style library: {loader.library_path}")
    logger.info(f"Project styles: {loader.project_path}")
    return StylePluginManager(loader)


def create_dispatcher(style_manager: StylePluginManagerInterface) -> EventDispatcher:
    """
    Create a dispatcher with the block builder and styles subscribers.

    Args:
        style_manager: Style service used to decorate render arrays
    """
    dispatcher = EventDispatcher()
    dispatcher.add_subscriber(BlockComponentRenderArray())
    dispatcher.add_subscriber(BlockComponentRenderArraySubscriber(style_manager))
    return dispatcher


def render_component(
    component: SectionComponent,
    dispatcher: EventDispatcher,
    contexts: dict[str, Any] | None = None,
    in_preview: bool = False,
) -> RenderArray:
    """
    Build the render array of a section component.

    Args:
        component: Component to render
        dispatcher: Dispatcher with render subscribers registered
        contexts: Available contexts
        in_preview: Whether the layout is being previewed

    Returns:
        The final render array (empty if nothing should render)
    """
    event = SectionComponentBuildRenderArrayEvent(component, contexts, in_preview)
    dispatcher.dispatch(event, LayoutBuilderEvents.SECTION_COMPONENT_BUILD_RENDER_ARRAY)
    return event.get_build()
