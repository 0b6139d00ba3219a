"""HTML escaping that respects trusted markup."""

from __future__ import annotations

import html
from typing import Any

from .values import as_text


def escape_html(value: Any) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters.

    Values exposing ``__html__`` are trusted and returned as their markup.
    """
    if hasattr(value, "__html__"):
        return str(value.__html__())
    if value is None:
        return ""
    return html.escape(as_text(value), quote=True)


e = escape_html

__all__ = ["e", "escape_html"]
