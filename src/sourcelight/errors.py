"""Shared exception classes for sourcelight.

The highlighting engine itself never raises; these cover the style
configuration layer and the CLI that sits on top of it.
"""

from __future__ import annotations


class StyleNotFoundError(Exception):
    """Raised when a named color scheme is not known to Pygments."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unknown style '{name}'.\n"
            "Use 'none', 'vim', or one of the installed Pygments styles\n"
            "(list them with: python -c \"from pygments.styles import "
            "get_all_styles; print(*get_all_styles())\")"
        )


class StyleConfigError(Exception):
    """Raised when a style file cannot be read or is malformed."""
