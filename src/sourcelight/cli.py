"""CLI entry point for sourcelight."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from sourcelight.config import load_style, resolve_style
from sourcelight.errors import StyleConfigError, StyleNotFoundError
from sourcelight.lang import coerce_language
from sourcelight.manager import HighlighterManager

logger = logging.getLogger(__name__)


def parse_line_range(value: str) -> tuple[int | None, int | None]:
    """Parse ``START:END``, ``START:``, ``:END`` or ``N`` (1-based, inclusive)."""
    start_s, sep, end_s = value.partition(":")
    try:
        start = int(start_s) if start_s else None
        end = int(end_s) if end_s else None
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line range: {value!r}")
    if not sep:
        end = start
    if (start is not None and start < 1) or (end is not None and end < 1):
        raise argparse.ArgumentTypeError(f"line numbers start at 1: {value!r}")
    if start is not None and end is not None and end < start:
        raise argparse.ArgumentTypeError(f"empty line range: {value!r}")
    return start, end


def _add_language_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        default=None,
        help="Language name, e.g. c, c++, objc, java (inferred from the path if omitted)",
    )


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``select`` and ``highlight`` subcommands."""
    sel = subparsers.add_parser("select", help="Show which highlighter would be used")
    _add_language_arg(sel)
    sel.add_argument("--path", default="", help="Source file path")

    hl = subparsers.add_parser("highlight", help="Highlight a source file")
    hl.add_argument("file", help="Source file to highlight")
    _add_language_arg(hl)
    hl.add_argument(
        "--style",
        default="vim",
        help="'vim', 'none', or a Pygments style name (default: vim)",
    )
    hl.add_argument(
        "--style-file",
        default=None,
        help="JSON style file (overrides --style)",
    )
    hl.add_argument(
        "--lines",
        type=parse_line_range,
        default=(None, None),
        help="Line range START:END to highlight (1-based, inclusive)",
    )
    hl.add_argument("--line", type=int, default=None, help="Cursor line (1-based)")
    hl.add_argument(
        "--column",
        type=int,
        default=1,
        help="Cursor column (1-based, default: 1)",
    )
    hl.add_argument(
        "--raw",
        action="store_true",
        help="Write the decorated text instead of JSON",
    )


def run_select(args: argparse.Namespace) -> dict[str, Any]:
    language = coerce_language(args.language)
    highlighter = HighlighterManager().get_highlighter_for(language, args.path)
    return {
        "language": language.name.lower(),
        "path": args.path,
        "highlighter": highlighter.name,
    }


def run_highlight(args: argparse.Namespace) -> dict[str, Any]:
    if args.style_file is not None:
        style = load_style(args.style_file)
    else:
        style = resolve_style(args.style)

    source = Path(args.file).read_text(errors="replace")
    lines = source.splitlines(keepends=True)

    start, end = args.lines
    start = start or 1
    if lines and start > len(lines):
        return {"error": f"Line {start} is past the end of {args.file} ({len(lines)} lines)"}
    end = min(end or len(lines), len(lines))
    selected = lines[start - 1:end]
    text = "".join(selected)

    cursor_pos = None
    if args.line is not None and start <= args.line <= end:
        offset = sum(len(line) for line in lines[start - 1:args.line - 1])
        column = min(max(args.column, 1), len(lines[args.line - 1]))
        cursor_pos = offset + column - 1

    language = coerce_language(args.language)
    highlighter = HighlighterManager().get_highlighter_for(language, args.file)
    logger.debug("highlighting %s lines %d-%d with %s", args.file, start, end, highlighter.name)

    return {
        "file": args.file,
        "language": language.name.lower(),
        "highlighter": highlighter.name,
        "start_line": start,
        "end_line": start + len(selected) - 1,
        "source": text,
        "highlighted": highlighter.highlight(style, text, cursor_pos),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sourcelight",
        description="Colorize C-family source fragments for terminal display",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command")
    register(sub)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "select":
            result = run_select(args)
        else:
            result = run_highlight(args)
    except (StyleNotFoundError, StyleConfigError, OSError) as exc:
        json.dump({"error": str(exc)}, sys.stdout, indent=2)
        print()
        return 1

    if "error" in result:
        json.dump(result, sys.stdout, indent=2)
        print()
        return 1

    if args.command == "highlight" and args.raw:
        sys.stdout.write(result["highlighted"])
        return 0

    json.dump(result, sys.stdout, indent=2)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
