"""
Section component render array event.
"""

from __future__ import annotations

from typing import Any

from ui_styles_layout_builder.events.dispatcher import Event
from ui_styles_layout_builder.models.component import SectionComponent

RenderArray = dict[str, Any]


class SectionComponentBuildRenderArrayEvent(Event):
    """
    Dispatched when the render array of a section component is built.

    Listeners read the current build and may replace it with set_build().
    """

    def __init__(
        self,
        component: SectionComponent,
        contexts: dict[str, Any] | None = None,
        in_preview: bool = False,
    ):
        super().__init__()
        self.component = component
        self.contexts = contexts or {}
        self.in_preview = in_preview
        self._build: RenderArray = {}

    def get_component(self) -> SectionComponent:
        return self.component

    def get_contexts(self) -> dict[str, Any]:
        return self.contexts

    def get_build(self) -> RenderArray:
        return self._build

    def set_build(self, build: RenderArray) -> None:
        self._build = build
