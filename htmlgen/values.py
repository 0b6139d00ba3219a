"""Value resolution helpers: deferred evaluation and flattening."""

from __future__ import annotations

import inspect
from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Any, Dict, Iterable, Tuple, Union

from pydantic import BaseModel

from .errors import EvaluationDepthError

# Deferred results allowed along one evaluation path before it is considered runaway.
MAX_EVALUATION_DEPTH = 64

Key = Union[int, str]
FlatMapping = Dict[Key, Any]

SCALAR_TYPES = (str, bytes, bytearray, int, float, bool)
TEXT_TYPES = (str, bytes, bytearray)


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, SCALAR_TYPES)


def as_text(value: Any) -> str:
    """Convert a value to text, decoding bytes as UTF-8."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def is_index(key: Any) -> bool:
    """Return True for synthetic sequential keys (ints, but not bools)."""
    return isinstance(key, int) and not isinstance(key, bool)


def is_convertible(value: Any) -> bool:
    """Return True for objects that expose a conversion to a mapping or list."""
    if isinstance(value, BaseModel):
        return True
    return callable(getattr(value, "to_array", None)) and not isinstance(value, type)


def is_container(value: Any) -> bool:
    if isinstance(value, TEXT_TYPES):
        return False
    return isinstance(value, (Mapping, Sequence, Set, Iterator))


def is_arrayable(value: Any) -> bool:
    """Check if a value can be used as a mapping or list of values."""
    return is_convertible(value) or is_container(value)


def is_stringable(value: Any) -> bool:
    """Return True when the value knows how to turn itself into text."""
    if is_scalar(value) or hasattr(value, "__html__"):
        return True
    return any("__str__" in vars(klass) for klass in type(value).__mro__[:-1])


def use_as_callable(value: Any) -> bool:
    """Determine if a value is a deferred computation.

    Only callables that can be invoked without arguments count. Strings,
    classes and containers are never deferred, even when Python would
    consider them callable.
    """
    if isinstance(value, TEXT_TYPES + (type,)) or is_arrayable(value):
        return False
    if not callable(value):
        return False
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        # Some builtins expose no signature.
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True


def _sorted_members(members: Set) -> list:
    return sorted(members, key=as_text)


def to_collection(value: Any) -> Union[Mapping, list, tuple]:
    """Convert an arrayable value into a plain mapping or sequence.

    Sets come back sorted by their text so output does not depend on hashing.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump()
    elif is_convertible(value):
        value = value.to_array()
    if isinstance(value, (Mapping, list, tuple)):
        return value
    if isinstance(value, Set):
        return _sorted_members(value)
    if is_container(value):
        return list(value)
    return [value]


def iter_items(container: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(container, Mapping):
        return container.items()
    if isinstance(container, Set):
        return enumerate(_sorted_members(container))
    return enumerate(container)


def evaluate(value: Any, _depth: int = 0) -> Any:
    """Recursively resolve deferred values.

    Callables are invoked until a concrete value comes back, then containers
    are rebuilt with every element evaluated. Mapping keys are preserved and
    sequences come back as lists. Exceptions raised by callables propagate.

    Every deferred call along a path counts towards ``MAX_EVALUATION_DEPTH``,
    including calls made for elements of a container that a callable returned.
    """
    depth = _depth
    while use_as_callable(value):
        depth += 1
        if depth > MAX_EVALUATION_DEPTH:
            raise EvaluationDepthError(
                f"Deferred value still unresolved after {MAX_EVALUATION_DEPTH} calls: {value!r}"
            )
        value = value()

    if is_arrayable(value):
        collection = to_collection(value)
        if isinstance(collection, Mapping):
            return {key: evaluate(item, depth) for key, item in collection.items()}
        return [evaluate(item, depth) for item in collection]

    return value


def flatten(*inputs: Any) -> FlatMapping:
    """Flatten nested containers into one ordered level, preserving string keys.

    Integer keys are treated as "next position" and renumbered from 0 in the
    order they are visited. String keys keep their first position and take
    the last value seen for them.
    """
    flat: FlatMapping = {}
    position = 0

    def visit(key: Any, item: Any) -> None:
        nonlocal position
        if is_convertible(item):
            for flat_key, flat_item in flatten(to_collection(item)).items():
                visit(flat_key, flat_item)
        elif is_container(item):
            for child_key, child in iter_items(item):
                visit(child_key, child)
        elif is_index(key):
            flat[position] = item
            position += 1
        else:
            flat[key] = item

    for index, item in enumerate(inputs):
        visit(index, item)
    return flat


__all__ = [
    "FlatMapping",
    "MAX_EVALUATION_DEPTH",
    "as_text",
    "evaluate",
    "flatten",
    "is_arrayable",
    "is_container",
    "is_convertible",
    "is_index",
    "is_scalar",
    "is_stringable",
    "iter_items",
    "to_collection",
    "use_as_callable",
]
