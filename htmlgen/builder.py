"""Build HTML element strings from tag names, attributes and contents."""

from __future__ import annotations

from typing import Any, List, Optional

from markupsafe import Markup

from .attributes import DEFAULT_QUOTE_CHAR, build_attributes_string
from .dom_model import HtmlElement
from .escaping import escape_html
from .values import as_text, evaluate, flatten, is_scalar, is_stringable

DO_ESCAPE = True
DONT_ESCAPE = False

# Elements that never get a closing tag when they have no content.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Rendered elements longer than this are laid out over several lines.
LINE_WIDTH = 80

TRIM_CHARS = " \t\n\r\0\x0b"


def is_void_element(tag_name: str) -> bool:
    return tag_name.lower() in VOID_ELEMENTS


def _content_fragment(key: Any, item: Any, escape_contents: bool) -> Optional[str]:
    if isinstance(item, HtmlElement):
        return str(item.to_html())
    if hasattr(item, "__html__"):
        # Trusted markup is used as is.
        return str(item.__html__())
    if not is_scalar(item):
        if not is_stringable(item):
            return None
        item = str(item)

    if isinstance(key, str) and key.strip(TRIM_CHARS) and item:
        # A string key is the content when its value is truthy.
        item = key

    if item is None or isinstance(item, bool):
        return None

    text = as_text(item).strip(TRIM_CHARS)
    if escape_contents:
        return escape_html(text)
    return text


def build_contents_string(contents: Any = None, escape_contents: bool = DO_ESCAPE) -> Markup:
    """Build the inner contents of an element.

    Contents are evaluated and flattened first. Nested elements and objects
    with ``__html__`` are rendered without escaping, other objects are
    converted with ``str()`` or dropped when they have no text form. Entries
    keyed by a non-blank string render the key itself when the value is
    truthy. Empty fragments are dropped and the rest are joined by newlines.
    """
    fragments: List[str] = []
    for key, item in flatten(evaluate(contents)).items():
        fragment = _content_fragment(key, item, escape_contents)
        if fragment:
            fragments.append(fragment)
    return Markup("\n".join(fragments))


def build_html_element(
    tag_name: str,
    attributes: Any = None,
    contents: Any = None,
    escape_contents: bool = DO_ESCAPE,
    quote_char: Any = DEFAULT_QUOTE_CHAR,
) -> Markup:
    """Build the markup for a single element and its children.

    Void elements without content get no closing tag. The element is split
    over several lines when it is longer than ``LINE_WIDTH`` characters or
    when its content already spans more than one line.
    """
    tag_name = escape_html(tag_name)

    opening = f"<{tag_name}{build_attributes_string(attributes, quote_char)}>"
    content = str(build_contents_string(contents, escape_contents))
    closing = ""
    if content or not is_void_element(tag_name):
        closing = f"</{tag_name}>"

    parts = [part for part in (opening, content, closing) if part]

    glue = ""
    if len("".join(parts)) > LINE_WIDTH or "\n" in content:
        glue = "\n"

    return Markup(glue.join(parts))


__all__ = [
    "DONT_ESCAPE",
    "DO_ESCAPE",
    "LINE_WIDTH",
    "VOID_ELEMENTS",
    "build_contents_string",
    "build_html_element",
    "is_void_element",
]
