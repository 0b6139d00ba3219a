"""Element values that can be nested inside other elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List

from markupsafe import Markup


@dataclass
class HtmlElement:
    tag_name: str
    attributes: Any = field(default_factory=dict)
    contents: Any = field(default_factory=list)
    escape_contents: bool = True
    quote_char: str = '"'

    def to_html(self) -> Markup:
        """Render this element and all of its children."""
        from .builder import build_html_element

        return build_html_element(
            self.tag_name,
            self.attributes,
            self.contents,
            self.escape_contents,
            self.quote_char,
        )

    def __html__(self) -> Markup:
        return self.to_html()

    def __str__(self) -> str:
        return str(self.to_html())


def dom_to_html(elements: Iterable[HtmlElement]) -> Markup:
    """Render sibling elements, one per line."""
    parts: List[str] = [str(element.to_html()) for element in elements]
    return Markup("\n".join(parts))


__all__ = ["HtmlElement", "dom_to_html"]
