"""Shared test fixtures for sourcelight tests."""

import textwrap

import pytest

from sourcelight.lang import LanguageType
from sourcelight.manager import HighlighterManager
from sourcelight.style import HighlightStyle, TokenCategory


@pytest.fixture
def manager():
    return HighlighterManager()


@pytest.fixture
def highlight_c(manager):
    """Highlight a snippet the way a host would for a C file."""
    highlighter = manager.get_highlighter_for(LanguageType.C, "main.c")

    def _highlight(code, style, cursor_pos=None):
        return highlighter.highlight(style, code, cursor_pos)

    return _highlight


@pytest.fixture
def tagged_style():
    """A style where every category is wrapped in a distinct XML-ish tag."""
    style = HighlightStyle()
    for category in TokenCategory:
        style.get(category).set(f"<{category.value}>", f"</{category.value}>")
    return style


@pytest.fixture
def strip_markers():
    """Remove every configured decoration of a style from a string."""
    def _strip(text, style):
        markers = set()
        for prefix, suffix in style.configured().values():
            markers.update(m for m in (prefix, suffix) if m)
        # Longest first so that "</x>" is not eaten by a shorter "<x>".
        for marker in sorted(markers, key=len, reverse=True):
            text = text.replace(marker, "")
        return text

    return _strip


@pytest.fixture
def c_source(tmp_path):
    """A small C file on disk."""
    path = tmp_path / "main.c"
    path.write_text(textwrap.dedent("""\
        #include <stdio.h>

        int main(int argc, char **argv) {
            /* greet */
            printf("hi %d\\n", argc);
            return 0;
        }
    """))
    return path
