"""One-level listing of the selected folder.

The listing is independent of the scanned tree: it is read from disk each time
the selection changes, so folders that became unreadable after the scan show
an error annotation instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import DirectoryChild, list_directory_children
from ..tree_model import ScrollState
from ..tree_pane.viewport import ViewportController

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewEntry:
    """One immediate child of the previewed folder."""

    name: str
    path: Path
    is_dir: bool
    file_size: int | None = None


class PreviewPane:
    """Lazily populated, independently scrollable folder listing."""

    def __init__(
        self,
        list_children: Callable[[Path], tuple[list[DirectoryChild], Exception | None]] = list_directory_children,
    ) -> None:
        self._list_children = list_children
        self.target_path: Path | None = None
        self.entries: tuple[PreviewEntry, ...] = ()
        self.error: str | None = None
        self.scroll = ScrollState()
        self.viewport = ViewportController(self.scroll, lambda: len(self.entries))

    @property
    def scroll_offset(self) -> int:
        return self.scroll.offset

    def show(self, path: Path) -> None:
        """Replace the listing with the immediate children of ``path``."""
        self.target_path = path
        self.scroll.offset = 0
        children, scan_error = self._list_children(path)
        if scan_error is not None:
            log.info("preview of %s failed: %s", path, scan_error)
            self.entries = ()
            self.error = _describe_error(scan_error)
            return
        self.error = None
        self.entries = tuple(
            PreviewEntry(
                name=child.name,
                path=child.path,
                is_dir=child.is_dir,
                file_size=child.file_size,
            )
            for child in children
        )

    def clear(self) -> None:
        self.target_path = None
        self.entries = ()
        self.error = None
        self.scroll.offset = 0

    def visible_entries(self) -> list[PreviewEntry]:
        return [self.entries[idx] for idx in self.viewport.visible_range()]


def _describe_error(exc: Exception) -> str:
    if isinstance(exc, PermissionError):
        return "permission denied"
    if isinstance(exc, FileNotFoundError):
        return "folder no longer exists"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror.lower()
    return "cannot read folder"
