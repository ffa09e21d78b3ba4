"""
mongoext types - Typed value constructors and identifier helpers

Plain Python numbers are ambiguous on the wire: the driver picks int32, int64
or double depending on the value. The constructors here make the intended
kind explicit at the call site.
"""
from typing import Any, Optional, Union

from bson.int64 import Int64
from bson.objectid import ObjectId

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _to_integer(value: Any, kind: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{kind}() does not accept booleans: {value!r}")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{kind}() requires an integral value, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise ValueError(f"{kind}() cannot parse {value!r} as an integer") from None
    raise TypeError(f"{kind}() expects a number or numeric string, got {type(value).__name__}")


class NumberInt(int):
    """
    32-bit integer.

    Subclasses ``int`` so the driver encodes it natively (as int32, since the
    range is checked here).

    Example:
        >>> NumberInt(3)
        NumberInt(3)
    """

    def __new__(cls, value: Any = 0):
        number = _to_integer(value, "Int")
        if not INT32_MIN <= number <= INT32_MAX:
            raise ValueError(f"Int() value out of 32-bit range: {number}")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"NumberInt({int(self)})"


class NumberDouble:
    """
    Double wrapper.

    The driver already encodes ``float`` as double, but a bare float is
    indistinguishable from a careless literal. Wrapping marks the intent; the
    validator replaces the wrapper with ``number`` before the write.
    """

    __slots__ = ("number",)

    def __init__(self, value: Any):
        if isinstance(value, bool):
            raise TypeError(f"Double() does not accept booleans: {value!r}")
        if isinstance(value, NumberDouble):
            value = value.number
        if not isinstance(value, (int, float, str)):
            raise TypeError(f"Double() expects a number or numeric string, got {type(value).__name__}")
        try:
            self.number = float(value)
        except ValueError:
            raise ValueError(f"Double() cannot parse {value!r} as a number") from None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NumberDouble):
            return self.number == other.number
        return NotImplemented

    def __hash__(self) -> int:
        return hash((NumberDouble, self.number))

    def __repr__(self) -> str:
        return f"Double({self.number!r})"


def Int(value: Any) -> NumberInt:
    """Typed 32-bit integer, e.g. ``{"points": Int(3)}``."""
    return NumberInt(value)


def Long(value: Any) -> Int64:
    """Typed 64-bit integer, e.g. ``{"views": Long(1200000000000)}``."""
    number = _to_integer(value, "Long")
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"Long() value out of 64-bit range: {number}")
    return Int64(number)


def Double(value: Any) -> NumberDouble:
    """Typed double, e.g. ``{"height": Double(1.75)}``."""
    return NumberDouble(value)


def Id(value: Optional[Union[str, bytes, ObjectId]] = None) -> ObjectId:
    """ObjectId from its hex form, or a fresh one when called without arguments."""
    return ObjectId(value)


def ids_equal(id1: Any, id2: Any) -> bool:
    """
    Compare two identifiers by their string form.

    Two missing ids are equal, a missing id never equals a present one.

    Example:
        >>> ids_equal(Id("56f6ca7e7f74b4fb3e3f7daf"), "56f6ca7e7f74b4fb3e3f7daf")
        True
    """
    if id1 is None and id2 is None:
        return True
    if id1 is None or id2 is None:
        return False
    return str(id1) == str(id2)
