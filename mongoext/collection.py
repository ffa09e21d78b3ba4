"""
mongoext Collection - Safe update, insert and find helpers over a driver collection
"""
from typing import Any, Dict, List, Optional, Union

from pymongo.collection import Collection as DriverCollection
from pymongo.results import InsertManyResult, InsertOneResult, UpdateResult

from .errors import MissingArgumentError
from .logger import logger
from .pretty import PrettyCursor
from .query import expand_query
from .validation import assert_safe_numbers


class Collection:
    """
    Collection wrapper adding type-safe writes and query shorthands.

    Attributes not defined here are looked up on the wrapped driver
    collection, so the wrapper can be used wherever the collection was.

    Args:
        collection: pymongo collection to delegate to

    Example:
        >>> players = client.collection('players')
        >>> players.set1('56f6ca7e7f74b4fb3e3f7daf', {'points': Int(3)})
    """

    def __init__(self, collection: DriverCollection):
        self.collection = collection
        self.name = collection.name

    def set1(self, query: Any, updates: Dict[str, Any]) -> UpdateResult:
        """
        Update a single document. See set().

        Example:
            >>> players.set1('56f6ca7e7f74b4fb3e3f7daf', {'points': Int(3)})
        """
        return self.set(query, updates, False)

    def set_n(self, query: Any, updates: Dict[str, Any]) -> UpdateResult:
        """
        Update every matching document. See set().

        Example:
            >>> users.set_n({'city': 'Barcelona'}, {'province': 'Barcelona'})
        """
        return self.set(query, updates, True)

    def set(
        self,
        query: Any,
        updates: Dict[str, Any],
        multi: Optional[bool] = None,
        upsert: bool = False
    ) -> UpdateResult:
        """
        Set fields with $set, never replacing whole documents.

        Numbers in ``updates`` must be given as Int(x), Long(x) or Double(x).

        Args:
            query: Filter, expanded with expand_query()
            updates: Fields to set
            multi: Update all matching documents; required, there is no default
            upsert: Insert a document when none matches (default: False)

        Returns:
            Driver UpdateResult

        Raises:
            MissingArgumentError: If updates or multi are not given
            UnsafeNumberError: If updates contains a raw number

        Example:
            >>> players.set('56f6ca7e7f74b4fb3e3f7daf', {'points': Int(3)}, False)
            >>> users.set({'city': 'Barcelona'}, {'province': 'Barcelona'}, True)
        """
        if updates is None:
            raise MissingArgumentError("updates are not specified")
        if multi is None:
            raise MissingArgumentError("multi is not specified")

        assert_safe_numbers(updates)

        filter = expand_query(query)
        update = {"$set": updates}
        logger.debug("set on %s: filter=%r multi=%s upsert=%s", self.name, filter, multi, upsert)

        if multi:
            return self.collection.update_many(filter, update, upsert=bool(upsert))
        return self.collection.update_one(filter, update, upsert=bool(upsert))

    def safe_insert(
        self,
        document: Union[Dict[str, Any], List[Dict[str, Any]]]
    ) -> Union[InsertOneResult, InsertManyResult]:
        """
        Insert like insert_one(), but numbers must be Int(x), Long(x) or Double(x).

        A list is treated as several documents; all of them are checked before
        anything is written.

        Args:
            document: Document or list of documents to insert

        Returns:
            Driver InsertOneResult, or InsertManyResult for a list

        Example:
            >>> players.safe_insert({'name': 'Max', 'score': Int(8), 'height': Double(1.75)})
        """
        if isinstance(document, list):
            assert_safe_numbers(document)
            logger.debug("safe_insert on %s: %d documents", self.name, len(document))
            return self.collection.insert_many(document)

        assert_safe_numbers(document)
        logger.debug("safe_insert on %s", self.name)
        return self.collection.insert_one(document)

    def find_n(
        self,
        query: Any = None,
        projection: Optional[Dict[str, Any]] = None
    ) -> PrettyCursor:
        """
        Like find(), with expand_query() and pretty output.

        Example:
            >>> users.find_n({'city': 'Barcelona'}, {'name': 1})
        """
        filter = expand_query(query)
        logger.debug("find_n on %s: filter=%r", self.name, filter)
        return PrettyCursor(self.collection.find(filter, projection))

    def find1(
        self,
        query: Any = None,
        projection: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Like find_one(), with expand_query().

        Example:
            >>> players.find1('56f6ca7e7f74b4fb3e3f7daf')
        """
        filter = expand_query(query)
        logger.debug("find1 on %s: filter=%r", self.name, filter)
        return self.collection.find_one(filter, projection)

    def __getattr__(self, name: str):
        if name.startswith("_") or name == "collection":
            raise AttributeError(name)
        return getattr(self.collection, name)

    def __repr__(self) -> str:
        """String representation of the collection."""
        return f"Collection(name='{self.name}')"
