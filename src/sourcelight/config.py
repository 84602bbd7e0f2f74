"""Building a HighlightStyle from names and JSON style files.

A style file is a JSON object::

    {
        "base": "monokai",
        "keyword": ["${ansi.bold}${ansi.fg.blue}", "${ansi.normal}"],
        "comment": ["<i>", "</i>"]
    }

``base`` is optional and accepts the same names as :func:`resolve_style`.
Every other key must be a category of :class:`HighlightStyle` mapping to a
``[prefix, suffix]`` pair.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path

from sourcelight.errors import StyleConfigError
from sourcelight.style import HighlightStyle

logger = logging.getLogger(__name__)

STYLE_KEYS = frozenset(f.name for f in fields(HighlightStyle))


def resolve_style(name: str | None) -> HighlightStyle:
    """Return the preset called *name*.

    ``"none"`` (or no name) is the empty style, ``"vim"`` the built-in
    terminal preset; any other name is looked up among Pygments styles.
    """
    if name is None or name == "none":
        return HighlightStyle()
    if name == "vim":
        return HighlightStyle.make_vim_style()
    return HighlightStyle.from_pygments_style(name)


def load_style(path: str | None) -> HighlightStyle | None:
    """Load a style file.  Returns None when no path is given."""
    if path is None:
        return None
    p = Path(path)
    try:
        data = json.loads(p.read_text())
    except OSError as exc:
        raise StyleConfigError(f"Cannot read style file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StyleConfigError(f"Invalid JSON in style file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise StyleConfigError(f"Style file {path} must contain a JSON object")
    return style_from_dict(data)


def style_from_dict(data: dict) -> HighlightStyle:
    base = data.get("base")
    if base is not None and not isinstance(base, str):
        raise StyleConfigError("'base' must be a style name")
    style = resolve_style(base)

    for key, value in data.items():
        if key == "base":
            continue
        if key not in STYLE_KEYS:
            raise StyleConfigError(
                f"Unknown style category '{key}' "
                f"(expected one of: {', '.join(sorted(STYLE_KEYS))})"
            )
        if (
            not isinstance(value, list)
            or len(value) != 2
            or not all(isinstance(part, str) for part in value)
        ):
            raise StyleConfigError(
                f"Style category '{key}' must be a [prefix, suffix] pair of strings"
            )
        getattr(style, key).set(value[0], value[1])

    logger.debug("loaded style with categories: %s", sorted(style.configured()))
    return style
