"""Open a folder in the platform's file manager."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)


def file_manager_command(path: Path, platform: str | None = None) -> list[str] | None:
    """Return the launcher argv for ``platform``; ``None`` means ``os.startfile``."""
    current = sys.platform if platform is None else platform
    if current.startswith("win"):
        return None
    if current == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_in_file_manager(path: Path) -> bool:
    """Launch the file manager for ``path`` without waiting for it.

    Returns ``False`` when the launcher cannot be started. Calling it again
    for the same path only opens another window; no app state is touched.
    """
    command = file_manager_command(path)
    try:
        if command is None:
            os.startfile(str(path))  # type: ignore[attr-defined]
        else:
            subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except OSError as exc:
        log.warning("file manager launch failed for %s: %s", path, exc)
        return False
    log.info("opened %s in file manager", path)
    return True
