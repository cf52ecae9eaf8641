#!/usr/bin/env python3
"""
Example: Styling a layout builder block.

This demonstrates how a component's selected styles and extra classes end
up on the block content once the render array is built.

Usage:
    python examples/render_component.py
"""

import json
import tempfile
from pathlib import Path

from ui_styles_layout_builder.app import create_dispatcher, create_style_manager, render_component
from ui_styles_layout_builder.models import SectionComponent


def main() -> None:
    """Demonstrate block styling."""
    print("Layout Builder Block Styles Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        style_manager = create_style_manager(Path(tmp))

        print("Available styles:")
        for category, styles in style_manager.get_grouped_definitions().items():
            print(f"  {category or 'Other'}:")
            for style in styles:
                print(f"    {style.id}: {', '.join(style.options)}")
        print()

        dispatcher = create_dispatcher(style_manager)

        component = SectionComponent(
            uuid="example-1",
            configuration={"id": "system_branding_block", "label": "Site branding", "content": "Logo"},
        )
        component.set("ui_styles", {"text_align": "text-center", "background": "bg-light"})
        component.set("ui_styles_extra", "shadow")

        build = render_component(component, dispatcher)
        print("Styled render array:")
        print(json.dumps(build, indent=2))
        print()

        empty = SectionComponent(uuid="example-2", configuration={"id": "empty_block"})
        print(f"Empty block outside preview: {render_component(empty, dispatcher)}")
        print(f"Empty block in preview: {render_component(empty, dispatcher, in_preview=True)}")


if __name__ == "__main__":
    main()
