from __future__ import annotations

import unittest
from pathlib import Path

from treegrow.file_tree_model import DIRECTORY, FILE, TreeNode
from treegrow.tree_model import flatten_revealed, tree_panel_title, tree_prefix
from treegrow.tree_model.rendering import format_tree_row
from treegrow.ui_theme import PLAIN_THEME


def _node(path: str, depth: int, *children: TreeNode, kind: str = DIRECTORY) -> TreeNode:
    node = TreeNode(name=Path(path).name, path=Path(path), kind=kind, depth=depth, revealed=True)
    node.children.extend(children)
    return node


def _tree() -> TreeNode:
    return _node(
        "/r",
        0,
        _node("/r/a", 1, _node("/r/a/x", 2), _node("/r/a/y", 2)),
        _node("/r/b", 1, _node("/r/b/z", 2)),
    )


class FlattenRevealedTests(unittest.TestCase):
    def test_pre_order_with_depths(self) -> None:
        rows = flatten_revealed(_tree())
        self.assertEqual([(row.node.name, row.depth) for row in rows], [
            ("r", 0),
            ("a", 1),
            ("x", 2),
            ("y", 2),
            ("b", 1),
            ("z", 2),
        ])

    def test_unrevealed_subtrees_are_skipped(self) -> None:
        root = _tree()
        root.children[0].children[1].revealed = False
        root.children[1].revealed = False

        rows = flatten_revealed(root)

        self.assertEqual([row.node.name for row in rows], ["r", "a", "x"])
        self.assertTrue(rows[2].is_last_child)

    def test_unrevealed_root_flattens_to_nothing(self) -> None:
        root = _tree()
        root.revealed = False
        self.assertEqual(flatten_revealed(root), [])

    def test_guides_follow_ancestor_siblings(self) -> None:
        rows = {row.node.name: row for row in flatten_revealed(_tree())}

        self.assertEqual(rows["a"].guides, ())
        self.assertFalse(rows["a"].is_last_child)
        self.assertEqual(rows["x"].guides, (True,))
        self.assertEqual(rows["z"].guides, (False,))
        self.assertTrue(rows["b"].is_last_child)


class TreeRowFormattingTests(unittest.TestCase):
    def test_prefixes_use_guides_and_branch_kind(self) -> None:
        rows = {row.node.name: row for row in flatten_revealed(_tree())}

        self.assertEqual(tree_prefix(rows["r"]), "")
        self.assertEqual(tree_prefix(rows["a"]), "├── ")
        self.assertEqual(tree_prefix(rows["y"]), "│   ╰── ")
        self.assertEqual(tree_prefix(rows["z"]), "    ╰── ")

    def test_frontier_frames_grow_the_connector(self) -> None:
        row = flatten_revealed(_tree())[1]
        self.assertEqual(tree_prefix(row, 0), "├─  ")
        self.assertEqual(tree_prefix(row, 1), "├── ")
        self.assertEqual(tree_prefix(row, 2), "├── ")

    def test_plain_row_text(self) -> None:
        root = _node("/r", 0, _node("/r/notes.txt", 1, kind=FILE))
        root.children[0].size = 2048
        rows = flatten_revealed(root)

        self.assertEqual(format_tree_row(rows[0], theme=PLAIN_THEME), "◆ r")
        self.assertEqual(
            format_tree_row(rows[1], show_size_labels=True, theme=PLAIN_THEME),
            "╰── · notes.txt [2.00 KiB]",
        )

    def test_directory_rows_get_trailing_slash(self) -> None:
        rows = flatten_revealed(_tree())
        self.assertEqual(format_tree_row(rows[1], theme=PLAIN_THEME), "├── ▸ a/")

    def test_panel_title_reports_progress(self) -> None:
        self.assertEqual(tree_panel_title(3, 9, 1, 4, complete=False), " growing (3/9) - Depth 1/4 ")
        self.assertEqual(tree_panel_title(9, 9, 4, 4, complete=True), " tree (9/9) - Depth 4/4 ")


if __name__ == "__main__":
    unittest.main()
