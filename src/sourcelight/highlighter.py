"""Highlighter interface and the pass-through fallback."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sourcelight.style import HighlightStyle


class Highlighter(ABC):
    """Turns source text into decorated text for one language family.

    Highlighters hold no state, so one instance can serve any number of
    callers and threads.
    """

    name: str = ""

    @abstractmethod
    def highlight(
        self,
        style: HighlightStyle,
        text: str,
        cursor_pos: int | None = None,
    ) -> str:
        """Return *text* with each token wrapped in its decoration from *style*.

        *cursor_pos* is a 0-based offset into *text*; the token it falls in is
        additionally wrapped in ``style.selected``.  Never raises.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class NoHighlighter(Highlighter):
    """Fallback for languages without a tokenizer: text comes back as is."""

    name = "none"

    def highlight(
        self,
        style: HighlightStyle,
        text: str,
        cursor_pos: int | None = None,
    ) -> str:
        if cursor_pos is None or not 0 <= cursor_pos < len(text):
            return text
        if not style.selected.is_set():
            return text
        return (
            text[:cursor_pos]
            + style.selected.apply(text[cursor_pos])
            + text[cursor_pos + 1:]
        )
