"""Full-frame composition for the tree, stats, preview and status areas."""

from __future__ import annotations

import re
import unittest
from pathlib import Path

from treegrow.ansi import display_width
from treegrow.file_tree_model import DIRECTORY, FILE, TreeNode, compute_stats
from treegrow.preview_pane import PreviewPane
from treegrow.render import RenderContext, build_frame, preview_viewport_height, render_frame, render_static_tree
from treegrow.render.info import HINTS_ANIMATING, HINTS_COMPLETE
from treegrow.sizes import format_size
from treegrow.tree_model import build_layout, flatten_revealed
from treegrow.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _tree() -> TreeNode:
    root = TreeNode(name="proj", path=Path("/proj"), kind=DIRECTORY, depth=0, size=300, file_count=2, deepest=2)
    src = TreeNode(name="src", path=Path("/proj/src"), kind=DIRECTORY, depth=1, size=300, file_count=2, deepest=2)
    src.children.append(TreeNode(name="a.py", path=Path("/proj/src/a.py"), kind=FILE, depth=2, size=100, file_count=1, deepest=2))
    src.children.append(TreeNode(name="b.py", path=Path("/proj/src/b.py"), kind=FILE, depth=2, size=200, file_count=1, deepest=2))
    root.children.append(src)
    for node in root.iter_nodes():
        node.revealed = True
    return root


def _context(**overrides) -> RenderContext:
    root = _tree()
    rows = flatten_revealed(root)
    values = dict(
        layout=build_layout(80, 20),
        tree_rows=rows,
        tree_offset=0,
        total_nodes=len(rows),
        stats=compute_stats(root).with_reveal_depth(2),
        root_path=Path("/proj"),
        preview=PreviewPane(list_children=lambda _path: ([], None)),
        complete=True,
        theme=PLAIN_THEME,
    )
    values.update(overrides)
    return RenderContext(**values)


def _screen_lines(frame: str) -> list[str]:
    clear = "\033[H\033[J"
    assert frame.startswith(clear)
    return frame[len(clear):].split("\r\n")


class BuildFrameTests(unittest.TestCase):
    def test_frame_fills_the_terminal(self) -> None:
        context = _context()
        lines = _screen_lines(build_frame(context))

        self.assertEqual(len(lines), context.layout.lines)
        for line in lines:
            self.assertEqual(display_width(line), context.layout.columns - 1)

    def test_tree_rows_and_stats_share_content_lines(self) -> None:
        lines = _screen_lines(build_frame(_context()))

        self.assertIn(" tree (4/4) - Depth 2/2 ", lines[0])
        self.assertTrue(lines[1].startswith("◆ proj"))
        self.assertTrue(lines[2].startswith("╰── ▸ src/"))
        self.assertTrue(lines[3].startswith("    ├── · a.py"))
        self.assertIn("Statistics", lines[1])
        joined = "\n".join(lines)
        self.assertIn("Total Size: " + format_size(300), joined)
        self.assertIn("Folders: 2", joined)
        self.assertIn("Files: 2", joined)

    def test_scroll_offset_shifts_tree_lines(self) -> None:
        lines = _screen_lines(build_frame(_context(tree_offset=2)))
        self.assertTrue(lines[1].startswith("    ├── · a.py"))

    def test_status_bar_switches_hints_and_messages(self) -> None:
        growing = _screen_lines(build_frame(_context(complete=False)))
        done = _screen_lines(build_frame(_context()))
        message = _screen_lines(build_frame(_context(status_message="Opened /proj/src")))

        self.assertIn(HINTS_ANIMATING.strip(), growing[-1])
        self.assertIn(HINTS_COMPLETE.strip()[:20], done[-1])
        self.assertIn("Opened /proj/src", message[-1])

    def test_preview_lists_selected_folder(self) -> None:
        preview = PreviewPane(list_children=lambda _path: ([], None))
        preview.show(Path("/proj/src"))
        lines = _screen_lines(build_frame(_context(preview=preview, selected_path=Path("/proj/src"))))
        joined = "\n".join(lines)
        self.assertIn("Preview: src (0)", joined)
        self.assertIn("(empty)", joined)

    def test_colored_frame_carries_ansi_styles(self) -> None:
        frame = build_frame(_context(theme=DEFAULT_THEME, selected_path=Path("/proj/src")))
        self.assertIsNotNone(re.search(r"\x1b\[[0-9;]*m", frame))

    def test_render_frame_uses_injected_writer(self) -> None:
        written: list[str] = []
        render_frame(_context(), written.append)
        self.assertEqual(len(written), 1)
        self.assertTrue(written[0].startswith("\033[H\033[J"))

    def test_preview_viewport_leaves_room_for_stats(self) -> None:
        self.assertEqual(preview_viewport_height(build_layout(80, 40)), 38 - 12)
        self.assertEqual(preview_viewport_height(build_layout(80, 5)), 1)


class StaticTreeTests(unittest.TestCase):
    def test_static_output_reveals_everything(self) -> None:
        root = _tree()
        for node in root.iter_nodes():
            node.revealed = False

        text = render_static_tree(root, compute_stats(root), PLAIN_THEME)

        self.assertEqual(
            text.splitlines(),
            [
                "◆ proj [300 B]",
                "╰── ▸ src/ [300 B]",
                "    ├── · a.py [100 B]",
                "    ╰── · b.py [200 B]",
                "",
                "2 folders, 2 files, 300 B, max depth 2",
            ],
        )


if __name__ == "__main__":
    unittest.main()
