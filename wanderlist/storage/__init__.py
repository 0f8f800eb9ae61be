"""
Storage abstraction layer.

Supported backends:
- SQL via Flask-SQLAlchemy (default)
- MongoDB
- In-memory (fallback when the configured database is unreachable)
"""

from wanderlist.storage.base import User, UserStore
from wanderlist.storage.factory import (
    StorageBackend,
    create_user_store,
    get_storage_backend,
    get_user_store,
)
from wanderlist.storage.memory import InMemoryUserStore

__all__ = [
    "User",
    "UserStore",
    "InMemoryUserStore",
    "StorageBackend",
    "create_user_store",
    "get_storage_backend",
    "get_user_store",
]
