"""Decoration settings for each lexical token category."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

from pygments.formatters import TerminalTrueColorFormatter
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String
from pygments.util import ClassNotFound

from sourcelight.ansi import format_ansi_terminal_codes
from sourcelight.errors import StyleNotFoundError


class TokenCategory(Enum):
    """Lexical categories a highlighter can decorate.

    Each value names the matching attribute of :class:`HighlightStyle`.
    """

    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    SCALAR_LITERAL = "scalar_literal"
    STRING_LITERAL = "string_literal"
    COMMENT = "comment"
    PP_DIRECTIVE = "pp_directive"
    COLON = "colon"
    COMMA = "comma"
    SEMICOLONS = "semicolons"
    BRACES = "braces"
    SQUARE_BRACKETS = "square_brackets"
    PARENTHESES = "parentheses"
    OPERATORS = "operators"


@dataclass
class ColorStyle:
    """A ``(prefix, suffix)`` pair wrapped around a token's text.

    An unset style (both parts empty) leaves text as it is.
    """

    prefix: str = ""
    suffix: str = ""

    def set(self, prefix: str, suffix: str) -> None:
        self.prefix = format_ansi_terminal_codes(prefix)
        self.suffix = format_ansi_terminal_codes(suffix)

    def is_set(self) -> bool:
        return bool(self.prefix or self.suffix)

    def apply(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


# Pygments token types whose colors stand in for each category.
PYGMENTS_TOKENS = {
    TokenCategory.IDENTIFIER: Name,
    TokenCategory.KEYWORD: Keyword,
    TokenCategory.SCALAR_LITERAL: Number,
    TokenCategory.STRING_LITERAL: String,
    TokenCategory.COMMENT: Comment,
    TokenCategory.PP_DIRECTIVE: Comment.Preproc,
    TokenCategory.COLON: Punctuation,
    TokenCategory.COMMA: Punctuation,
    TokenCategory.SEMICOLONS: Punctuation,
    TokenCategory.BRACES: Punctuation,
    TokenCategory.SQUARE_BRACKETS: Punctuation,
    TokenCategory.PARENTHESES: Punctuation,
    TokenCategory.OPERATORS: Operator,
}


@dataclass
class HighlightStyle:
    """Per-category decorations used by :meth:`Highlighter.highlight`.

    Every category starts unset.  ``selected`` marks the token under the
    cursor column when a caller passes one.
    """

    identifier: ColorStyle = field(default_factory=ColorStyle)
    keyword: ColorStyle = field(default_factory=ColorStyle)
    scalar_literal: ColorStyle = field(default_factory=ColorStyle)
    string_literal: ColorStyle = field(default_factory=ColorStyle)
    comment: ColorStyle = field(default_factory=ColorStyle)
    pp_directive: ColorStyle = field(default_factory=ColorStyle)
    colon: ColorStyle = field(default_factory=ColorStyle)
    comma: ColorStyle = field(default_factory=ColorStyle)
    semicolons: ColorStyle = field(default_factory=ColorStyle)
    braces: ColorStyle = field(default_factory=ColorStyle)
    square_brackets: ColorStyle = field(default_factory=ColorStyle)
    parentheses: ColorStyle = field(default_factory=ColorStyle)
    operators: ColorStyle = field(default_factory=ColorStyle)
    selected: ColorStyle = field(default_factory=ColorStyle)

    def get(self, category: TokenCategory) -> ColorStyle:
        return getattr(self, category.value)

    def configured(self) -> dict[str, tuple[str, str]]:
        """Return ``{name: (prefix, suffix)}`` for every set decoration."""
        return {
            f.name: (getattr(self, f.name).prefix, getattr(self, f.name).suffix)
            for f in fields(self)
            if getattr(self, f.name).is_set()
        }

    @classmethod
    def make_vim_style(cls) -> HighlightStyle:
        """The terminal default: purple comments, red literals, green keywords."""
        style = cls()
        style.comment.set("${ansi.fg.purple}", "${ansi.normal}")
        style.scalar_literal.set("${ansi.fg.red}", "${ansi.normal}")
        style.keyword.set("${ansi.fg.green}", "${ansi.normal}")
        return style

    @classmethod
    def from_pygments_style(cls, name: str) -> HighlightStyle:
        """Build 24-bit ANSI decorations from a Pygments color scheme.

        Raises StyleNotFoundError if *name* is not an installed style.
        """
        try:
            formatter = TerminalTrueColorFormatter(style=name)
        except ClassNotFound as exc:
            raise StyleNotFoundError(name) from exc

        style = cls()
        for category, ttype in PYGMENTS_TOKENS.items():
            prefix, suffix = formatter.style_string.get(str(ttype), ("", ""))
            if prefix:
                style.get(category).set(prefix, suffix)
        # Reverse video reads as a cursor on any background.
        style.selected.set("${ansi.negative}", "${ansi.normal}")
        return style
