"""Command-line front door for treegrow.

Parses CLI options, merges them with the persisted config, scans the target
directory, and dispatches into the interactive runtime. Non-interactive
streams get a static, fully grown tree instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from platformdirs import user_log_dir

from .file_tree_model import ScanError, compute_stats, scan_tree
from .render import render_static_tree
from .runtime import run_app
from .runtime.config import (
    APP_NAME,
    load_click_policy,
    load_left_pane_percent,
    load_show_files,
    load_show_hidden,
    load_show_size_labels,
    load_theme_name,
    load_tick_interval_ms,
)
from .runtime.state import CLICK_POLICIES, CLICK_POLICY_SECOND_CLICK
from .tree_model import DEFAULT_TICK_INTERVAL_SECONDS
from .ui_theme import available_theme_names, resolve_theme

log = logging.getLogger(__name__)

LOG_FILENAME = "treegrow.log"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _setup_logging(verbosity: int) -> None:
    # The terminal belongs to the UI, so records go to a file.
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    log_dir = Path(user_log_dir(APP_NAME, appauthor=False))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        level=level,
        filename=str(log_dir / LOG_FILENAME),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treegrow",
        description="Grow a directory tree in the terminal, level by level.",
    )
    parser.add_argument("path", help="Directory to scan.")
    parser.add_argument(
        "--files",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show files as tree nodes (default: folders only).",
    )
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include dot-entries (default: on).",
    )
    parser.add_argument(
        "--interval-ms",
        type=_positive_int,
        default=None,
        help="Milliseconds between growth levels (default: 10).",
    )
    parser.add_argument(
        "--click-policy",
        choices=CLICK_POLICIES,
        default=None,
        help="When a folder click opens the file manager (default: second-click).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--static", action="store_true", help="Print the grown tree and exit.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (-v info, -vv debug).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, scan the directory, and show it.

    Exits with status 1 and an ``Error:`` line on stderr when the path cannot
    be scanned; no UI is shown in that case.
    """
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    include_files = args.files if args.files is not None else load_show_files()
    show_hidden = args.hidden if args.hidden is not None else load_show_hidden()
    interval_ms = args.interval_ms if args.interval_ms is not None else load_tick_interval_ms()
    click_policy = args.click_policy or load_click_policy() or CLICK_POLICY_SECOND_CLICK

    path = Path(args.path)
    try:
        root = scan_tree(path, include_files=include_files, show_hidden=show_hidden)
    except ScanError as exc:
        log.error("scan failed for %s: %s", path, exc.reason)
        print(f"Error: {exc.message}", file=sys.stderr)
        raise SystemExit(1) from exc
    stats = compute_stats(root)

    interactive = sys.stdin.isatty() and sys.stdout.isatty()
    theme = resolve_theme(
        args.theme or load_theme_name(),
        no_color=args.no_color or not sys.stdout.isatty(),
    )
    if args.static or not interactive:
        sys.stdout.write(render_static_tree(root, stats, theme))
        return

    run_app(
        root,
        root.path,
        stats=stats,
        tick_interval_seconds=interval_ms / 1000.0 if interval_ms is not None else DEFAULT_TICK_INTERVAL_SECONDS,
        click_policy=click_policy,
        theme=theme,
        show_size_labels=load_show_size_labels(),
        left_pane_percent=load_left_pane_percent(),
    )


if __name__ == "__main__":
    main()
