"""
Default block render array builder.

Builds the initial render array for a block component. Other subscribers
run at a lower priority and decorate what this one produced.
"""

from __future__ import annotations

from typing import Any

from ui_styles_layout_builder.constants import DEFAULT_BUILDER_PRIORITY, LayoutBuilderEvents
from ui_styles_layout_builder.events import (
    RenderArray,
    SectionComponentBuildRenderArrayEvent,
    Subscription,
)


class BlockComponentRenderArray:
    """Builds a render array for block components."""

    def get_subscribed_events(self) -> list[Subscription]:
        return [
            Subscription(
                event=LayoutBuilderEvents.SECTION_COMPONENT_BUILD_RENDER_ARRAY,
                method="on_build_render",
                priority=DEFAULT_BUILDER_PRIORITY,
            )
        ]

    def on_build_render(self, event: SectionComponentBuildRenderArrayEvent) -> None:
        """
        Build the block render array.

        Blocks without content render nothing, except in preview where a
        placeholder keeps the block visible and selectable.
        """
        component = event.get_component()
        configuration = component.configuration
        plugin_id = component.get_plugin_id()

        content = self._build_content(configuration.get("content"))
        if content is None:
            if not event.in_preview:
                return
            label = configuration.get("label") or plugin_id
            content = {"#markup": f'Placeholder for the "{label}" block'}

        base_plugin_id, _, derivative_id = plugin_id.partition(":")
        build: RenderArray = {
            "#theme": "block",
            "#configuration": dict(configuration),
            "#plugin_id": plugin_id,
            "#base_plugin_id": base_plugin_id,
            "#derivative_plugin_id": derivative_id or None,
            "#weight": component.weight,
            "content": content,
        }
        event.set_build(build)

    def _build_content(self, content: Any) -> RenderArray | None:
        if not content:
            return None
        if isinstance(content, dict):
            return dict(content)
        return {"#markup": str(content)}
