"""ANSI terminal code templates.

Decoration strings may embed ``${ansi.<name>}`` placeholders, e.g.
``"${ansi.fg.green}"`` / ``"${ansi.normal}"``, which expand to the matching
SGR escape sequence.
"""

from __future__ import annotations

import re

ESCAPE = "\033["

_COLORS = ["black", "red", "green", "yellow", "blue", "purple", "cyan", "white"]

_ATTRIBUTES = {
    "normal": 0,
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "slow-blink": 5,
    "fast-blink": 6,
    "negative": 7,
    "conceal": 8,
    "crossed-out": 9,
}

CODES: dict[str, int] = dict(_ATTRIBUTES)
for _i, _color in enumerate(_COLORS):
    CODES[f"fg.{_color}"] = 30 + _i
    CODES[f"bg.{_color}"] = 40 + _i

_TEMPLATE_RE = re.compile(r"\$\{ansi\.([a-z.-]+)\}")


def sgr(*codes: int | str) -> str:
    """Build a Select Graphic Rendition sequence from numeric parameters."""
    return f"{ESCAPE}{';'.join(str(c) for c in codes)}m"


RESET = sgr(0)


def format_ansi_terminal_codes(text: str, do_color: bool = True) -> str:
    """Expand ``${ansi.*}`` placeholders in *text*.

    With ``do_color=False`` known placeholders are removed instead, which is
    what a host does when its output is not a color terminal.  Unknown
    placeholders are left untouched.
    """
    def _replace(match: re.Match[str]) -> str:
        code = CODES.get(match.group(1))
        if code is None:
            return match.group(0)
        return sgr(code) if do_color else ""

    return _TEMPLATE_RE.sub(_replace, text)
