"""
mongoext Client - Entry point wrapping a pymongo MongoClient
"""
import os
from typing import Any, List, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .collection import Collection
from .logger import logger


class Client:
    """
    Client handing out safe Collection wrappers for one database.

    Args:
        host: Server hostname, IP address or mongodb:// URI (default: 'localhost')
        port: Server port (default: 27017)
        database: Database name (default: 'test')
        timeout: Server selection timeout in seconds (default: 30)
        max_connections: Maximum number of connections in the pool (default: 10)
        mongo_client: Existing MongoClient to use instead of creating one
        **kwargs: Additional MongoClient options

    Example:
        >>> client = Client(host='localhost', port=27017, database='game')
        >>> client.ping()
        True
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 27017,
        database: str = "test",
        timeout: int = 30,
        max_connections: int = 10,
        mongo_client: Optional[MongoClient] = None,
        **kwargs: Any,
    ):
        self.host = host
        self.port = port
        self.timeout = timeout

        if mongo_client is None:
            mongo_client = MongoClient(
                host=host,
                port=port,
                serverSelectionTimeoutMS=timeout * 1000,
                maxPoolSize=max_connections,
                **kwargs,
            )
        self.mongo_client = mongo_client
        self.db = mongo_client[database]

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """
        Create a client from the MONGO_URL and MONGO_DB_NAME environment variables.

        Raises:
            ValueError: If either variable is missing

        Example:
            >>> client = Client.from_env()
        """
        mongo_url = os.environ.get("MONGO_URL")
        if not mongo_url:
            raise ValueError("Please set MONGO_URL in your environment variables.")

        mongo_db_name = os.environ.get("MONGO_DB_NAME")
        if not mongo_db_name:
            raise ValueError("Please set MONGO_DB_NAME in your environment variables.")

        return cls(host=mongo_url, database=mongo_db_name, **kwargs)

    def ping(self) -> bool:
        """
        Check if the server is reachable and responding.

        Returns:
            True if server is reachable, False otherwise
        """
        try:
            response = self.mongo_client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("Ping to %s failed: %s", self.host, e)
            return False
        return bool(response.get("ok"))

    def list_collections(self) -> List[str]:
        """
        List all collections in the database.

        Example:
            >>> client.list_collections()
            ['players', 'users']
        """
        return self.db.list_collection_names()

    def create_collection(self, name: str) -> bool:
        """Create a new collection."""
        self.db.create_collection(name)
        return True

    def drop_collection(self, name: str) -> bool:
        """Drop (delete) a collection."""
        self.db.drop_collection(name)
        return True

    def collection(self, name: str) -> Collection:
        """
        Get a safe collection wrapper.

        Args:
            name: Collection name

        Example:
            >>> players = client.collection('players')
            >>> players.safe_insert({'name': 'Max', 'score': Int(8)})
        """
        return Collection(self.db[name])

    def __getitem__(self, name: str) -> Collection:
        return self.collection(name)

    def close(self):
        """Close the client and release resources."""
        self.mongo_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation of the client."""
        return f"Client(host='{self.host}', port={self.port}, database='{self.db.name}')"
