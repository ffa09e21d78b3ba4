"""
mongoext errors
"""
from typing import Any


class MongoExtError(ValueError):
    """Base class for errors raised by the extensions (never by the driver)."""


class MissingArgumentError(MongoExtError):
    """Raised when a required update argument is left out."""


class UnsafeNumberError(MongoExtError):
    """
    Raised when a raw int or float is found in a document being written.

    Args:
        key: Dotted path of the offending field
        value: The raw number
    """

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"For safety reasons, specify number in `{key}: {value}` "
            f"as Int({value}), Long({value}) or Double({value})"
        )
