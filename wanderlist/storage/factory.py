"""
Storage factory for creating the user store.

The backend is chosen once at startup. If the configured database cannot
be reached the in-memory store is used for the rest of the process
lifetime; there is no retry.
"""

import logging
from enum import Enum

from flask import current_app

from wanderlist.errors import StorageUnavailable
from wanderlist.storage.base import UserStore
from wanderlist.storage.memory import InMemoryUserStore

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'user_store'


class StorageBackend(str, Enum):
    """Supported storage backends."""
    SQL = "sql"
    MONGODB = "mongodb"
    MEMORY = "memory"


def get_storage_backend(config) -> StorageBackend:
    """
    Determine which storage backend the config asks for.

    Raises ValueError for an unsupported name.
    """
    backend_str = str(config.get('STORAGE_BACKEND', 'sql')).lower()

    try:
        return StorageBackend(backend_str)
    except ValueError:
        raise ValueError(
            f"Unsupported storage backend: {backend_str}. "
            f"Supported backends: {[b.value for b in StorageBackend]}"
        )


def _build_store(backend: StorageBackend, config) -> UserStore:
    if backend == StorageBackend.SQL:
        from wanderlist.storage.sql import SQLUserStore
        return SQLUserStore()

    if backend == StorageBackend.MONGODB:
        from wanderlist.storage.mongodb import MongoUserStore
        return MongoUserStore(
            connection_string=config['MONGO_URI'],
            database_name=config['MONGO_DATABASE'],
            collection_name=config['MONGO_COLLECTION'],
            timeout_ms=config.get('MONGO_TIMEOUT_MS', 2000),
        )

    return InMemoryUserStore()


def create_user_store(app) -> UserStore:
    """
    Create, set up and attach the user store for ``app``.

    Args:
        app: Flask application with its config loaded

    Returns:
        The active store, also available as ``app.extensions['user_store']``
    """
    backend = get_storage_backend(app.config)
    store = _build_store(backend, app.config)

    with app.app_context():
        try:
            store.setup()
        except StorageUnavailable as e:
            logger.warning(
                '%s storage not available (%s) - using in-memory storage',
                backend.value, e,
            )
            store = InMemoryUserStore()

    logger.info('Using %s storage', store.backend_name)
    app.extensions[EXTENSION_KEY] = store
    return store


def get_user_store() -> UserStore:
    """Return the store attached to the current app."""
    return current_app.extensions[EXTENSION_KEY]
