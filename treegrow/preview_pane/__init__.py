"""Preview pane for the selected folder's immediate contents."""

from .pane import PreviewEntry, PreviewPane

__all__ = [
    "PreviewEntry",
    "PreviewPane",
]
