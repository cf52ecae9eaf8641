"""
Style plugin manager - merges style classes into render arrays.

The manager knows the available style definitions and how to attach
CSS classes to a render array. Blocks get special treatment: classes go
onto the block content rather than the block wrapper.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ui_styles_layout_builder.constants import ATTRIBUTES_KEY
from ui_styles_layout_builder.events.render_array import RenderArray
from ui_styles_layout_builder.models.style import StyleDefinition
from ui_styles_layout_builder.styles.loader import StyleLoader

logger = logging.getLogger(__name__)


@runtime_checkable
class StylePluginManagerInterface(Protocol):
    """Service that resolves style selections into render array classes."""

    def get_definitions(self) -> list[StyleDefinition]: ...

    def add_classes(
        self,
        element: RenderArray,
        selected: Sequence[str] = (),
        extra: str = "",
    ) -> RenderArray: ...


def merge_classes(selected: Sequence[str], extra: str) -> list[str]:
    """
    Combine selected classes with free-text extra classes.

    Args:
        selected: Selected style option classes
        extra: Space separated extra classes

    Returns:
        Non-empty classes in first-seen order, without duplicates
    """
    classes: list[str] = []
    for css_class in [*selected, *extra.split()]:
        if css_class and css_class not in classes:
            classes.append(css_class)
    return classes


class StylePluginManager:
    """
    Provides style definitions and applies style classes.
    """

    def __init__(self, loader: StyleLoader):
        """
        Initialize the manager.

        Args:
            loader: Loader used to discover style definitions
        """
        self.loader = loader

    def get_definitions(self) -> list[StyleDefinition]:
        """Get all enabled style definitions."""
        return self.loader.get_definitions()

    def get_definition(self, style_id: str) -> StyleDefinition | None:
        """Get a style definition by id."""
        return self.loader.get_style(style_id)

    def get_grouped_definitions(self) -> dict[str, list[StyleDefinition]]:
        """
        Get enabled style definitions grouped by category.

        Styles without a category are grouped under an empty string.
        """
        groups: dict[str, list[StyleDefinition]] = {}
        for style in self.get_definitions():
            groups.setdefault(style.category, []).append(style)
        return groups

    def is_known_class(self, css_class: str) -> bool:
        """Check if a class is an option of any enabled style."""
        return any(style.has_option(css_class) for style in self.get_definitions())

    def add_classes(
        self,
        element: RenderArray,
        selected: Sequence[str] = (),
        extra: str = "",
    ) -> RenderArray:
        """
        Add style classes to a render array.

        Args:
            element: Render array to decorate
            selected: Selected style option classes
            extra: Space separated extra classes

        Returns:
            A decorated copy of the element, or the element itself when
            there is nothing to add
        """
        classes = merge_classes(selected, extra)
        if not classes:
            return element

        element = copy.deepcopy(element)

        # Blocks are special: style the content, not the wrapper
        if element.get("#theme") == "block":
            if isinstance(element.get("content"), dict):
                element["content"] = self._add_to_block_content(element["content"], classes)
            else:
                element = self._add_to_block_content(element, classes)
        else:
            element = self._add_to_element(element, classes)

        logger.debug(f"Added classes {classes} to render array")
        return element

    def _add_to_block_content(self, content: RenderArray, classes: list[str]) -> RenderArray:
        """Add classes to block content, wrapping bare content first."""
        if "#theme" not in content and "#type" not in content:
            content = {"#type": "container", "content": content}
        return self._add_to_element(content, classes)

    def _add_to_element(self, element: RenderArray, classes: list[str]) -> RenderArray:
        """Append classes to the element's class attribute."""
        attributes = element.setdefault(ATTRIBUTES_KEY, {})
        existing = attributes.get("class", [])
        if isinstance(existing, str):
            existing = existing.split()
        attributes["class"] = merge_classes([*existing, *classes], "")
        return element
