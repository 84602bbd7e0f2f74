"""Highlighter for C, C++, Objective-C and Objective-C++.

The lexer runs a single forward pass and never backtracks past the token it
is looking at.  It accepts any text: fragments cut out of a file, lines with
unbalanced quotes, binary garbage.  Every input character ends up in exactly
one token, so the undecorated output is always the input.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from sourcelight.highlighter import Highlighter
from sourcelight.style import HighlightStyle, TokenCategory

KEYWORDS = frozenset({
    # C
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "inline", "int", "long", "register", "restrict", "return", "short",
    "signed", "sizeof", "static", "struct", "switch", "typedef", "union",
    "unsigned", "void", "volatile", "while",
    "_Alignas", "_Alignof", "_Atomic", "_Bool", "_Complex", "_Generic",
    "_Imaginary", "_Noreturn", "_Static_assert", "_Thread_local",
    # C++
    "alignas", "alignof", "and", "and_eq", "asm", "bitand", "bitor", "bool",
    "catch", "char16_t", "char32_t", "char8_t", "class", "compl", "concept",
    "consteval", "constexpr", "constinit", "const_cast", "co_await",
    "co_return", "co_yield", "decltype", "delete", "dynamic_cast",
    "explicit", "export", "false", "friend", "mutable", "namespace", "new",
    "noexcept", "not", "not_eq", "nullptr", "operator", "or", "or_eq",
    "private", "protected", "public", "reinterpret_cast", "requires",
    "static_assert", "static_cast", "template", "this", "thread_local",
    "throw", "true", "try", "typeid", "typename", "using", "virtual",
    "wchar_t", "xor", "xor_eq",
    # GNU extensions
    "__asm__", "__attribute__", "__inline__", "__restrict__", "__typeof__",
    "typeof",
})

# Objective-C directives, only keywords when spelled with a leading '@'.
OBJC_AT_KEYWORDS = frozenset({
    "autoreleasepool", "catch", "class", "compatibility_alias", "defs",
    "dynamic", "encode", "end", "finally", "implementation", "import",
    "interface", "optional", "package", "private", "property", "protected",
    "protocol", "public", "required", "selector", "synchronized",
    "synthesize", "throw", "try",
})

# Each of these is its own segment; "&&" or "<<=" are never fused.
OPERATOR_CHARS = frozenset("+-*/&|~^%<>=!?")

PUNCTUATION = {
    ":": TokenCategory.COLON,
    ",": TokenCategory.COMMA,
    ";": TokenCategory.SEMICOLONS,
    "{": TokenCategory.BRACES,
    "}": TokenCategory.BRACES,
    "[": TokenCategory.SQUARE_BRACKETS,
    "]": TokenCategory.SQUARE_BRACKETS,
    "(": TokenCategory.PARENTHESES,
    ")": TokenCategory.PARENTHESES,
}

_NEWLINE_RE = re.compile(r"\r?\n")
_SPACE_RE = re.compile(r"(?:[ \t\f\v]|\r(?!\n))+")
_CONTINUATION_RE = re.compile(r"\\[ \t]*\r?\n")
_NUMBER_RE = re.compile(r"\.?[0-9](?:[eEpP][+-]|'[0-9A-Za-z_]|[0-9A-Za-z_.])*")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_AT_KEYWORD_RE = re.compile(r"@([A-Za-z_]+)")
_CHAR_STOP_RE = re.compile(r"[\\'\n]")
_STRING_STOP_RE = re.compile(r'[\\"]')


class Token(NamedTuple):
    start: int
    end: int
    category: TokenCategory | None


def _string_end(text: str, pos: int) -> int | None:
    """Offset just past the closing quote of the string at *pos*, or None."""
    i = pos + 1
    while True:
        match = _STRING_STOP_RE.search(text, i)
        if match is None:
            return None
        if match.group() == "\\":
            i = match.end() + 1
            continue
        return match.end()


def _char_end(text: str, pos: int) -> tuple[int, bool]:
    """Scan the char literal at *pos*, never past the end of its line.

    Returns ``(offset, closed)``: the offset just past the closing quote, or
    the offset where the scan gave up.  Every quote before that offset is
    escaped, so none of them can start a closed literal either.
    """
    i = pos + 1
    while True:
        match = _CHAR_STOP_RE.search(text, i)
        if match is None:
            return len(text), False
        stop = match.group()
        if stop == "\n":
            return match.start(), False
        if stop == "\\":
            if match.end() >= len(text) or text[match.end()] == "\n":
                return match.end(), False
            i = match.end() + 1
            continue
        return match.end(), True


def _scan_word(text: str, pos: int) -> tuple[int, TokenCategory] | None:
    """Match a number, keyword or identifier starting at *pos*."""
    match = _NUMBER_RE.match(text, pos)
    if match:
        return match.end(), TokenCategory.SCALAR_LITERAL

    match = _IDENTIFIER_RE.match(text, pos)
    if match:
        if match.group() in KEYWORDS:
            return match.end(), TokenCategory.KEYWORD
        return match.end(), TokenCategory.IDENTIFIER

    if text[pos] == "@":
        match = _AT_KEYWORD_RE.match(text, pos)
        if match and match.group(1) in OBJC_AT_KEYWORDS:
            return match.end(), TokenCategory.KEYWORD
    return None


def tokenize(text: str) -> Iterator[Token]:
    """Split *text* into consecutive tokens covering every character.

    Whitespace and characters with no category come back with
    ``category=None``.
    """
    pos = 0
    length = len(text)
    at_line_start = True
    in_directive = False
    # Quotes before this offset are known not to open a closed char literal.
    unclosed_char_end = 0

    while pos < length:
        match = _NEWLINE_RE.match(text, pos)
        if match:
            yield Token(pos, match.end(), None)
            pos = match.end()
            at_line_start = True
            in_directive = False
            continue

        match = _SPACE_RE.match(text, pos)
        if match:
            yield Token(pos, match.end(), TokenCategory.PP_DIRECTIVE if in_directive else None)
            pos = match.end()
            continue

        if in_directive:
            match = _CONTINUATION_RE.match(text, pos)
            if match:
                yield Token(pos, match.end(), TokenCategory.PP_DIRECTIVE)
                pos = match.end()
                continue

        ch = text[pos]
        end = pos + 1
        category: TokenCategory | None = None
        unterminated = False

        if text.startswith("//", pos):
            newline = text.find("\n", pos)
            end = length if newline == -1 else newline
            category = TokenCategory.COMMENT
            in_directive = False
        elif text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            end = length if close == -1 else close + 2
            category = TokenCategory.COMMENT
            in_directive = False
        elif ch == "#" and at_line_start:
            category = TokenCategory.PP_DIRECTIVE
            in_directive = True
        elif ch == '"':
            close = _string_end(text, pos)
            if close is None:
                end = length
                unterminated = True
            else:
                end = close
                category = TokenCategory.STRING_LITERAL
        elif ch == "'" and pos >= unclosed_char_end:
            close, closed = _char_end(text, pos)
            if closed:
                end = close
                category = TokenCategory.SCALAR_LITERAL
            else:
                unclosed_char_end = close
        else:
            word = _scan_word(text, pos)
            if word is not None:
                end, category = word
            elif ch in PUNCTUATION:
                category = PUNCTUATION[ch]
            elif ch in OPERATOR_CHARS:
                category = TokenCategory.OPERATORS

        # Everything left on a directive line belongs to the directive,
        # except text whose extent is in doubt.
        if in_directive and not unterminated:
            category = TokenCategory.PP_DIRECTIVE

        at_line_start = False
        yield Token(pos, end, category)
        pos = end


class ClangHighlighter(Highlighter):
    """Tokenizing highlighter for the C language family."""

    name = "clang"

    def highlight(
        self,
        style: HighlightStyle,
        text: str,
        cursor_pos: int | None = None,
    ) -> str:
        parts: list[str] = []
        marked_cursor = False
        for start, end, category in tokenize(text):
            chunk = text[start:end]
            if (
                cursor_pos is not None
                and not marked_cursor
                and start <= cursor_pos < end
            ):
                marked_cursor = True
                chunk = style.selected.apply(chunk)
            if category is not None:
                chunk = style.get(category).apply(chunk)
            parts.append(chunk)
        return "".join(parts)
