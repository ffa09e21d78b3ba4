"""
mongoext pretty - Human-readable cursor output
"""
from itertools import islice
from typing import Any, Dict, Iterator

from bson import json_util


class PrettyCursor:
    """
    Cursor wrapper that prints its documents as indented Extended JSON.

    Iterates exactly like the wrapped cursor. Chaining methods such as
    ``sort()`` or ``limit()`` keep returning the wrapper, everything else is
    delegated.

    Args:
        cursor: Driver cursor
        indent: JSON indentation (default: 4)

    Example:
        >>> users.find_n({'city': 'Barcelona'}).limit(5)
        {
            "_id": {"$oid": "..."},
            ...
        }
    """

    # Documents shown per repr, like the shell's batch
    batch_size = 20

    def __init__(self, cursor, indent: int = 4):
        self.cursor = cursor
        self.indent = indent

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.cursor)

    def __next__(self) -> Dict[str, Any]:
        return next(self.cursor)

    def __getattr__(self, name: str):
        if name.startswith("_") or name == "cursor":
            raise AttributeError(name)
        attr = getattr(self.cursor, name)
        if not callable(attr):
            return attr

        def chained(*args, **kwargs):
            result = attr(*args, **kwargs)
            return self if result is self.cursor else result

        return chained

    def pretty(self) -> "PrettyCursor":
        """Already pretty; kept for shell-style chaining."""
        return self

    def format(self, document: Dict[str, Any]) -> str:
        """Render a single document."""
        return json_util.dumps(
            document,
            json_options=json_util.RELAXED_JSON_OPTIONS,
            indent=self.indent,
        )

    def __str__(self) -> str:
        preview = iter(self.cursor.clone())
        lines = [self.format(doc) for doc in islice(preview, self.batch_size)]
        if next(preview, None) is not None:
            lines.append("(more documents available)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return str(self)
