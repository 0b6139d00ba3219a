"""Command-line interface for htmlgen."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .attributes import ATTRIBUTE_QUOTE_CHARS
from .dom_model import dom_to_html
from .errors import HtmlgenError
from .io_utils import load_documents, warn, write_text
from .models import RenderOptions


def _option_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.quote is not None:
        if args.quote not in ATTRIBUTE_QUOTE_CHARS:
            warn(f"Unsupported quote character {args.quote!r}; using '\"'.")
        overrides["quote_char"] = RenderOptions(quote_char=args.quote).quote_char
    if args.no_escape:
        overrides["escape_contents"] = False
    return overrides


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    try:
        documents = load_documents(input_path)
    except HtmlgenError as exc:
        raise SystemExit(str(exc)) from exc

    overrides = _option_overrides(args)
    elements = []
    for document in documents:
        options = (document.options or RenderOptions()).model_copy(update=overrides)
        elements.append(document.model_copy(update={"options": options}).to_element())

    output = str(dom_to_html(elements)) + "\n"
    if args.output:
        write_text(args.output, output)
    else:
        sys.stdout.write(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlgen", description="Render HTML elements from YAML or JSON documents."
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render an element document to HTML.",
        description=(
            "Validate an element document (YAML, or JSON by .json suffix) and "
            "print the rendered markup."
        ),
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the element document.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the rendered HTML (default: stdout).",
    )
    render_parser.add_argument(
        "--quote",
        default=None,
        help="Quote character for attribute values, \" or '.",
    )
    render_parser.add_argument(
        "--no-escape",
        dest="no_escape",
        action="store_true",
        help="Do not HTML-encode content strings (trusted documents only).",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
