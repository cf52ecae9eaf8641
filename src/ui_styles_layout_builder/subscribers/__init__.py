"""
Event subscribers for section component rendering.
"""

from ui_styles_layout_builder.subscribers.block_component import BlockComponentRenderArray
from ui_styles_layout_builder.subscribers.ui_styles import (
    BlockComponentRenderArraySubscriber,
    get_extra_classes,
    get_selected_styles,
)

__all__ = [
    "BlockComponentRenderArray",
    "BlockComponentRenderArraySubscriber",
    "get_extra_classes",
    "get_selected_styles",
]
