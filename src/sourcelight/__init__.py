"""sourcelight: decorate C-family source fragments by token category.

Public API
----------
- HighlighterManager().get_highlighter_for(language, path) -> Highlighter
- Highlighter.highlight(style, text, cursor_pos=None) -> str
- HighlightStyle, with make_vim_style() and from_pygments_style(name)
- load_style(path) -> HighlightStyle | None
"""

from sourcelight.config import load_style, resolve_style  # noqa: F401
from sourcelight.highlighter import Highlighter, NoHighlighter  # noqa: F401
from sourcelight.clang import ClangHighlighter  # noqa: F401
from sourcelight.lang import LanguageType  # noqa: F401
from sourcelight.manager import HighlighterManager  # noqa: F401
from sourcelight.style import ColorStyle, HighlightStyle, TokenCategory  # noqa: F401
