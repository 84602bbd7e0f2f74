"""Selection of a highlighter for a language tag and/or file path."""

from __future__ import annotations

import logging

from sourcelight.clang import ClangHighlighter
from sourcelight.highlighter import Highlighter, NoHighlighter
from sourcelight.lang import (
    LanguageType,
    coerce_language,
    has_c_family_extension,
    is_c_family,
)

logger = logging.getLogger(__name__)

_CLANG = ClangHighlighter()
_NONE = NoHighlighter()


class HighlighterManager:
    """Maps languages and file names to one of the built-in highlighters.

    The set of highlighters is fixed, so the manager keeps no state and is
    cheap to create wherever one is needed.
    """

    def get_highlighter_for(
        self,
        language: LanguageType | int | str | None = LanguageType.UNKNOWN,
        path: str | None = "",
    ) -> Highlighter:
        """Return the highlighter for *language*, falling back to *path*.

        A known language always decides on its own; the file extension is only
        consulted when the language is unknown.  Never returns None.
        """
        language = coerce_language(language)

        if is_c_family(language):
            highlighter: Highlighter = _CLANG
        elif language != LanguageType.UNKNOWN:
            highlighter = _NONE
        elif has_c_family_extension(path):
            highlighter = _CLANG
        else:
            highlighter = _NONE

        logger.debug(
            "highlighter for language=%s path=%r: %s",
            language.name, path, highlighter.name,
        )
        return highlighter

    @property
    def highlighters(self) -> tuple[Highlighter, ...]:
        return (_CLANG, _NONE)
