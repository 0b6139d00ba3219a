"""Attribute string building."""

from __future__ import annotations

from typing import Any, Dict, List

from markupsafe import Markup

from .escaping import escape_html
from .values import (
    as_text,
    evaluate,
    flatten,
    is_arrayable,
    is_index,
    is_stringable,
    iter_items,
    to_collection,
)

ATTRIBUTE_QUOTE_CHARS = ('"', "'")
DEFAULT_QUOTE_CHAR = '"'


def attribute_quote_char(quote_char: Any = DEFAULT_QUOTE_CHAR) -> str:
    """Return a usable quote character, falling back to a double quote."""
    if quote_char in ATTRIBUTE_QUOTE_CHARS:
        return quote_char
    return DEFAULT_QUOTE_CHAR


def flatten_attributes(attributes: Any) -> Dict[str, Any]:
    """Expand positional entries into named attributes.

    A positional container is merged into the parent, any other positional
    value becomes a boolean attribute named after it.
    """
    if attributes is None:
        return {}
    if not is_arrayable(attributes):
        attributes = [attributes]

    flat: Dict[str, Any] = {}
    for name, value in iter_items(to_collection(attributes)):
        if is_index(name):
            if is_arrayable(value):
                flat.update(flatten_attributes(value))
            elif value is not None and value is not False and as_text(value) != "":
                flat[as_text(value)] = True
        else:
            flat[as_text(name)] = value
    return flat


def flatten_attribute_value(name: str, value: Any) -> Any:
    """Join a list-valued attribute into a single string.

    Named entries contribute their key when truthy and remove that key from
    the list when falsy. Returns None when nothing is left.
    """
    if not is_arrayable(value):
        return value

    values: List[Any] = []
    for key, item in flatten(value).items():
        if item:
            values.append(item if is_index(key) else key)
        elif not is_index(key):
            values = [existing for existing in values if existing != key]

    if not values:
        return None
    separator = " " if name == "class" else ","
    return separator.join(as_text(item) for item in values)


def build_attributes_string(attributes: Any = None, quote_char: Any = DEFAULT_QUOTE_CHAR) -> Markup:
    """Build the attribute string that follows a tag name.

    Every emitted attribute is prefixed by a single space; boolean ``True``
    renders the name alone and ``False``/``None`` omits the attribute.
    """
    quote = attribute_quote_char(quote_char)
    parts: List[str] = []
    for name, value in flatten_attributes(evaluate(attributes)).items():
        if not is_arrayable(value) and not is_stringable(value):
            value = False
        value = flatten_attribute_value(name, value)
        if value is None or value is False:
            continue
        parts.append(" " + escape_html(name))
        if value is not True:
            parts.append(f"={quote}{escape_html(value)}{quote}")
    return Markup("".join(parts))


__all__ = [
    "ATTRIBUTE_QUOTE_CHARS",
    "attribute_quote_char",
    "build_attributes_string",
    "flatten_attribute_value",
    "flatten_attributes",
]
