"""Tree-pane scrolling and click handling."""

from .events import TreePaneMouseHandlers
from .viewport import PAGE_SCROLL_LINES, ScrollState, ViewportController

__all__ = [
    "PAGE_SCROLL_LINES",
    "ScrollState",
    "TreePaneMouseHandlers",
    "ViewportController",
]
