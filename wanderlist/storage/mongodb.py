"""
MongoDB storage backend.

Each user is one document in a single collection::

    {"username": ..., "password_hash": ..., "want_to_go": [...], "created_at": ...}
"""

import logging
from datetime import datetime
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from wanderlist.errors import AlreadyPresent, DuplicateUser, StorageUnavailable, UserNotFound
from wanderlist.storage.base import User, UserStore, hash_password

logger = logging.getLogger(__name__)


class MongoUserStore(UserStore):
    """User store backed by one MongoDB collection"""

    backend_name = "mongodb"

    def __init__(
        self,
        connection_string: str,
        database_name: str,
        collection_name: str,
        timeout_ms: int = 2000,
        client: Optional[MongoClient] = None,
    ):
        """
        Args:
            connection_string: MongoDB connection URI
            database_name: Database holding the users collection
            collection_name: Collection name
            timeout_ms: Server selection timeout for the startup ping
            client: Already constructed client to use instead of connecting
        """
        self._connection_string = connection_string
        self._database_name = database_name
        self._collection_name = collection_name
        self._timeout_ms = timeout_ms
        self._client: Optional[MongoClient] = client

    @property
    def collection(self):
        if self._client is None:
            raise RuntimeError("Store not initialized. Call setup() first.")
        return self._client[self._database_name][self._collection_name]

    def setup(self) -> None:
        """Connect, ping once and ensure the unique username index."""
        try:
            if self._client is None:
                self._client = MongoClient(
                    self._connection_string,
                    serverSelectionTimeoutMS=self._timeout_ms,
                )
            self._client.admin.command("ping")
            self.collection.create_index(
                [("username", ASCENDING)],
                unique=True,
                name="idx_username",
            )
        except PyMongoError as e:
            self.close()
            raise StorageUnavailable(str(e)) from e

        logger.info(
            "MongoDB store ready: %s/%s",
            self._database_name,
            self._collection_name,
        )

    def find_user_by_name(self, username: str) -> Optional[User]:
        doc = self.collection.find_one({"username": username})
        return User.from_dict(doc) if doc else None

    def create_user(self, username: str, password: str) -> User:
        if self.collection.find_one({"username": username}, {"_id": 1}):
            raise DuplicateUser(username)

        user = User(
            username=username,
            password_hash=hash_password(password),
            created_at=datetime.utcnow(),
        )
        try:
            self.collection.insert_one(user.to_dict())
        except DuplicateKeyError as e:
            raise DuplicateUser(username) from e
        return user

    def append_to_wishlist(self, username: str, destination_name: str) -> list[str]:
        doc = self.collection.find_one({"username": username}, {"want_to_go": 1})
        if doc is None:
            raise UserNotFound(username)
        current = doc.get("want_to_go") or []
        if destination_name in current:
            raise AlreadyPresent(username, destination_name)

        self.collection.update_one(
            {"username": username},
            {"$push": {"want_to_go": destination_name}},
        )
        return current + [destination_name]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
