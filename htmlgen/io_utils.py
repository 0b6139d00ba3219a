"""Utility helpers for document IO and warnings."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import ValidationError

from .errors import DocumentError
from .models import ElementDocument


def read_document_data(path: Path) -> Any:
    """Read JSON (by suffix) or YAML data from a file."""
    if not path.exists():
        raise DocumentError(f"Element document not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentError(f"Invalid element document {path}: {exc}") from exc


def load_documents(path: Path) -> List[ElementDocument]:
    """Load one element document, or a list of sibling documents."""
    data = read_document_data(path)
    if data is None:
        raise DocumentError(f"Element document is empty: {path}")
    items = data if isinstance(data, list) else [data]

    documents: List[ElementDocument] = []
    errors: List[str] = []
    for index, item in enumerate(items, start=1):
        try:
            documents.append(ElementDocument.model_validate(item))
        except ValidationError as exc:
            errors.append(f"{path} item {index}: {exc}")

    if errors:
        raise DocumentError("\n".join(errors))
    return documents


def write_text(path: Union[str, Path], content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""
    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["load_documents", "read_document_data", "warn", "write_text"]
