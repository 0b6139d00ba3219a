"""Jinja integration for rendering elements inside templates."""

from __future__ import annotations

from typing import Optional

from jinja2 import BaseLoader, Environment, StrictUndefined, select_autoescape

from .attributes import build_attributes_string
from .builder import build_contents_string, build_html_element


def install(env: Environment) -> Environment:
    """Register the element helpers on an existing environment.

    Adds the ``html_element`` global and the ``attributes`` and ``contents``
    filters. Their results are Markup, so autoescaping leaves them alone.
    """
    env.globals["html_element"] = build_html_element
    env.filters["attributes"] = build_attributes_string
    env.filters["contents"] = build_contents_string
    return env


def create_environment(loader: Optional[BaseLoader] = None) -> Environment:
    """Create an autoescaping environment with the element helpers installed."""
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return install(env)


__all__ = ["create_environment", "install"]
