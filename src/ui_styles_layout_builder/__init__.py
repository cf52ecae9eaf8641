"""
Layout builder block styles.

Applies style classes chosen per block to the render arrays the layout
builder produces for section components.
"""

from ui_styles_layout_builder.subscribers import BlockComponentRenderArraySubscriber

__version__ = "0.1.0"

__all__ = ["BlockComponentRenderArraySubscriber", "__version__"]
