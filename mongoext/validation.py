"""
mongoext validation - Numeric safety checks for documents being written
"""
from collections.abc import MutableMapping
from datetime import datetime
from typing import Any, Iterator, Optional, Tuple, Union

from bson.int64 import Int64
from bson.objectid import ObjectId

from .errors import UnsafeNumberError
from .logger import logger
from .types import NumberDouble, NumberInt

# Values that are never inspected further
SAFE_TYPES = (ObjectId, datetime, NumberInt, Int64)

Container = Union[MutableMapping, list]


def is_safe_value(value: Any) -> bool:
    """Return True for opaque typed values (ids, dates, typed integers)."""
    return isinstance(value, SAFE_TYPES)


def _is_raw_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, (bool,) + SAFE_TYPES)


def _entries(container: Container) -> Iterator[Tuple[Any, Any]]:
    if isinstance(container, list):
        return iter(list(enumerate(container)))
    if isinstance(container, MutableMapping):
        return iter(list(container.items()))
    raise TypeError(
        f"Expected a document (mutable mapping) or a list, got {type(container).__name__}"
    )


def _join(path: Optional[str], key: Any) -> str:
    return str(key) if path is None else f"{path}.{key}"


def assert_safe_numbers(document: Container, path: Optional[str] = None) -> None:
    """
    Check that every number in ``document`` was built with Int(), Long() or Double().

    Walks mappings, lists and tuples at any depth. Double() wrappers are
    replaced in place by their float payload, so the document can go straight
    to the driver afterwards.

    Args:
        document: Document (or array) to check
        path: Dotted path of ``document`` itself, used in error messages

    Raises:
        UnsafeNumberError: If a raw int or float is found
        TypeError: If ``document`` is neither a mutable mapping nor a list

    Example:
        >>> doc = {'name': 'Max', 'score': Int(8), 'height': Double(1.75)}
        >>> assert_safe_numbers(doc)
        >>> doc['height']
        1.75
    """
    for key, value in _entries(document):
        if value is None:
            continue

        if _is_raw_number(value):
            raise UnsafeNumberError(_join(path, key), value)

        if isinstance(value, NumberDouble):
            logger.debug("Unwrapping %r at %s", value, _join(path, key))
            document[key] = value.number

        elif isinstance(value, (MutableMapping, list)):
            assert_safe_numbers(value, _join(path, key))

        elif isinstance(value, tuple):
            items = list(value)
            assert_safe_numbers(items, _join(path, key))
            if items != list(value):
                document[key] = tuple(items)
