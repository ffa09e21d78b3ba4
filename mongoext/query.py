"""
mongoext query - Query shorthand expansion and operator helpers
"""
import re
from typing import Any, Dict

from bson.objectid import ObjectId

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def expand_query(query: Any) -> Any:
    """
    Expand shorthand queries into query documents.

    The driver only accepts documents as filters, so an ObjectId or its
    24-character hex string is rewritten as an ``_id`` match. Anything else
    is returned unchanged.

    Args:
        query: None, an ObjectId, an ObjectId hex string or a query document

    Returns:
        Query document (or the input itself when nothing applies)

    Example:
        >>> expand_query("56f6ca7e7f74b4fb3e3f7daf")
        {'_id': ObjectId('56f6ca7e7f74b4fb3e3f7daf')}
        >>> expand_query({'city': 'Barcelona'})
        {'city': 'Barcelona'}
    """
    if not query:
        return query

    if isinstance(query, ObjectId):
        return {"_id": query}

    if isinstance(query, str) and OBJECT_ID_PATTERN.fullmatch(query):
        return {"_id": ObjectId(query)}

    return query


def not_(value: Any) -> Dict[str, Any]:
    """Not equal to ($ne), e.g. ``{'corpId': not_(None), 'state': not_(Int(0))}``"""
    return {"$ne": value}
