"""
Style system - bundles of CSS classes that site builders pick per block.
"""

from ui_styles_layout_builder.styles.loader import StyleLoader
from ui_styles_layout_builder.styles.manager import (
    StylePluginManager,
    StylePluginManagerInterface,
    merge_classes,
)

__all__ = [
    "StyleLoader",
    "StylePluginManager",
    "StylePluginManagerInterface",
    "merge_classes",
]
