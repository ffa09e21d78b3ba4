"""
mongoext

Shell-style helpers for pymongo: typed numbers for writes, ObjectId query
shorthands and short update/find methods.
"""

from .client import Client
from .collection import Collection
from .errors import MissingArgumentError, MongoExtError, UnsafeNumberError
from .pretty import PrettyCursor
from .query import OBJECT_ID_PATTERN, expand_query, not_
from .types import Double, Id, Int, Long, NumberDouble, NumberInt, ids_equal
from .validation import SAFE_TYPES, assert_safe_numbers, is_safe_value

__version__ = "1.0.0"
__all__ = [
    "Client",
    "Collection",
    "PrettyCursor",
    "MongoExtError",
    "MissingArgumentError",
    "UnsafeNumberError",
    "OBJECT_ID_PATTERN",
    "expand_query",
    "not_",
    "Int",
    "Long",
    "Double",
    "Id",
    "NumberInt",
    "NumberDouble",
    "ids_equal",
    "SAFE_TYPES",
    "assert_safe_numbers",
    "is_safe_value",
]


def create_client(host="localhost", port=27017, **kwargs):
    """
    Create a new client with default configuration.

    Args:
        host: Server hostname, IP address or URI (default: 'localhost')
        port: Server port (default: 27017)
        **kwargs: Additional client configuration options

    Returns:
        Client: mongoext client instance

    Example:
        >>> client = create_client(host='localhost', port=27017, database='game')
        >>> players = client.collection('players')
    """
    return Client(host=host, port=port, **kwargs)
