"""Filesystem scanning and domain-tree construction."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .types import DIRECTORY, FILE, TreeNode

log = logging.getLogger(__name__)

SCAN_NOT_FOUND = "not_found"
SCAN_NOT_A_DIRECTORY = "not_a_directory"
SCAN_PERMISSION_DENIED = "permission_denied"


class ScanError(Exception):
    """Raised when the scan root itself cannot be used."""

    def __init__(self, path: Path, reason: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason
        self.message = message


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child plus the metadata observed while listing it."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool
    file_size: int | None
    identity: tuple[int, int] | None = None


def _describe_entry(entry: os.DirEntry) -> DirectoryChild:
    """Collect link/dir flags plus ``lstat`` size and identity for one entry."""
    try:
        is_symlink = entry.is_symlink()
    except OSError:
        is_symlink = False
    try:
        # Follows links, so a link to a folder still lists as a folder.
        is_dir = entry.is_dir()
    except OSError:
        is_dir = False

    try:
        info = entry.stat(follow_symlinks=False)
    except OSError:
        info = None
    return DirectoryChild(
        name=entry.name,
        path=Path(entry.path),
        is_dir=is_dir,
        is_symlink=is_symlink,
        file_size=None if info is None or is_dir else int(info.st_size),
        identity=None if info is None else (int(info.st_dev), int(info.st_ino)),
    )


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
) -> tuple[list[DirectoryChild], Exception | None]:
    """List direct children sorted directories-first, then by folded name.

    Returns ``(children, scan_error)``. ``scan_error`` is set, and the list is
    empty, when the directory cannot be read.
    """
    try:
        with os.scandir(directory) as entries:
            children = [
                _describe_entry(entry)
                for entry in entries
                if show_hidden or not entry.name.startswith(".")
            ]
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def _checked_root(root: Path) -> Path:
    """Validate the scan root, raising ``ScanError`` for unusable paths."""
    if not os.path.lexists(root):
        raise ScanError(root, SCAN_NOT_FOUND, f"Path '{root}' does not exist")
    if not root.is_dir():
        raise ScanError(root, SCAN_NOT_A_DIRECTORY, f"Path '{root}' is not a directory")
    try:
        resolved = root.resolve()
        with os.scandir(resolved):
            pass
    except PermissionError as exc:
        raise ScanError(root, SCAN_PERMISSION_DENIED, f"Path '{root}': permission denied") from exc
    except OSError as exc:
        raise ScanError(root, SCAN_NOT_FOUND, f"Path '{root}': {exc.strerror or exc}") from exc
    return resolved


def scan_tree(
    root: Path,
    include_files: bool = False,
    show_hidden: bool = True,
) -> TreeNode:
    """Scan ``root`` into a ``TreeNode`` hierarchy with rolled-up aggregates.

    Symbolic links are never followed: a linked directory becomes a leaf.
    Directories reached twice through the same device/inode pair (bind mounts)
    are also kept as leaves, so the result is always finite.

    With ``include_files=False`` file nodes are dropped, but their sizes and
    counts still roll up into every ancestor through ``loose_file_size`` and
    ``file_count``.
    """
    root_path = _checked_root(Path(root))
    visited: set[tuple[int, int]] = set()
    try:
        root_stat = root_path.stat()
        visited.add((int(root_stat.st_dev), int(root_stat.st_ino)))
    except OSError:
        pass

    def expand(node: TreeNode) -> list[TreeNode]:
        # Lists one directory into ``node``; returns the subdirectories to enter.
        children, scan_error = list_directory_children(node.path, show_hidden)
        node.deepest = node.depth
        if scan_error is not None:
            node.unreadable = True
            log.debug("skipping unreadable directory %s: %s", node.path, scan_error)
            return []

        node.entry_count = len(children)
        child_depth = node.depth + 1
        descend: list[TreeNode] = []
        for child in children:
            node.deepest = max(node.deepest, child_depth)
            if child.is_dir:
                child_node = TreeNode(
                    name=child.name,
                    path=child.path,
                    kind=DIRECTORY,
                    depth=child_depth,
                    deepest=child_depth,
                    is_symlink=child.is_symlink,
                )
                node.children.append(child_node)
                if child.is_symlink:
                    continue
                if child.identity is not None:
                    if child.identity in visited:
                        log.debug("not descending into already visited directory %s", child.path)
                        continue
                    visited.add(child.identity)
                descend.append(child_node)
                continue

            file_size = child.file_size or 0
            node.file_count += 1
            if include_files:
                node.children.append(
                    TreeNode(
                        name=child.name,
                        path=child.path,
                        kind=FILE,
                        depth=child_depth,
                        size=file_size,
                        file_count=1,
                        deepest=child_depth,
                        is_symlink=child.is_symlink,
                    )
                )
            else:
                node.loose_file_size += file_size
        return descend

    def roll_up(node: TreeNode) -> None:
        for child in node.children:
            if child.is_dir:
                node.file_count += child.file_count
                node.deepest = max(node.deepest, child.deepest)
        node.size = sum(child.size for child in node.children) + node.loose_file_size

    root_node = TreeNode(
        name=root_path.name or str(root_path),
        path=root_path,
        kind=DIRECTORY,
        depth=0,
    )
    # Explicit stack, no recursion. A directory is pushed twice; the second pop
    # rolls up its children.
    stack: list[tuple[TreeNode, bool]] = [(root_node, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            roll_up(node)
            continue
        stack.append((node, True))
        stack.extend((child_node, False) for child_node in reversed(expand(node)))
    log.info(
        "scanned %s: %d files, %d bytes, depth %d",
        root_path,
        root_node.file_count,
        root_node.size,
        root_node.deepest,
    )
    return root_node


__all__ = [
    "SCAN_NOT_FOUND",
    "SCAN_NOT_A_DIRECTORY",
    "SCAN_PERMISSION_DENIED",
    "ScanError",
    "DirectoryChild",
    "list_directory_children",
    "scan_tree",
]
