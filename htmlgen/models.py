"""Pydantic models for render options and element documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .attributes import attribute_quote_char
from .dom_model import HtmlElement


class RenderOptions(BaseModel):
    """Options applied when rendering an element."""

    escape_contents: bool = Field(
        True,
        alias="escapeContents",
        description="HTML-encode content strings; disable only for trusted content.",
    )
    quote_char: str = Field(
        '"',
        alias="quoteChar",
        description="Quote character around attribute values, either \" or '.",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("quote_char", mode="before")
    @classmethod
    def _fallback_quote_char(cls, value: Any) -> str:
        # Unsupported characters fall back to a double quote.
        return attribute_quote_char(value)


class ElementDocument(BaseModel):
    """Description of an element tree as found in YAML or JSON files."""

    tag: str = Field(..., description="Tag name of the element.")
    attributes: Union[Dict[str, Any], List[Any]] = Field(
        default_factory=dict,
        description="Attribute mapping, or a list of names and mappings.",
    )
    contents: Any = Field(
        default_factory=list,
        description=(
            "Text, a nested element, or a list of either. Mappings with a "
            "'tag' key are read as nested elements."
        ),
    )
    options: Optional[RenderOptions] = Field(
        None, description="Render options; inherited from the parent when absent."
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("contents")
    @classmethod
    def _nested_documents(cls, value: Any) -> Any:
        return _parse_contents(value)

    def to_element(self, inherited: Optional[RenderOptions] = None) -> HtmlElement:
        """Convert the document and its nested documents into elements."""
        options = self.options or inherited or RenderOptions()
        return HtmlElement(
            tag_name=self.tag,
            attributes=self.attributes,
            contents=_convert_contents(self.contents, options),
            escape_contents=options.escape_contents,
            quote_char=options.quote_char,
        )


def _parse_contents(contents: Any) -> Any:
    if isinstance(contents, dict) and "tag" in contents:
        return ElementDocument.model_validate(contents)
    if isinstance(contents, list):
        return [_parse_contents(item) for item in contents]
    if isinstance(contents, dict):
        return {key: _parse_contents(item) for key, item in contents.items()}
    return contents


def _convert_contents(contents: Any, options: RenderOptions) -> Any:
    if isinstance(contents, ElementDocument):
        return contents.to_element(options)
    if isinstance(contents, list):
        return [_convert_contents(item, options) for item in contents]
    if isinstance(contents, dict):
        return {key: _convert_contents(item, options) for key, item in contents.items()}
    return contents


__all__ = ["ElementDocument", "RenderOptions"]
