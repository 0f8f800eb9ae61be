"""
In-memory storage backend.

Used when no database is reachable at startup. Data lives as long as the
app instance and is lost on restart. There is no locking; concurrent
writers to the same user may lose an update.
"""

from typing import Optional

from wanderlist.errors import AlreadyPresent, DuplicateUser, UserNotFound
from wanderlist.storage.base import User, UserStore, hash_password


class InMemoryUserStore(UserStore):
    """Users kept in a dict keyed by username"""

    backend_name = "memory"

    def __init__(self):
        self._users: dict[str, User] = {}

    def find_user_by_name(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def create_user(self, username: str, password: str) -> User:
        if username in self._users:
            raise DuplicateUser(username)
        user = User(username=username, password_hash=hash_password(password))
        self._users[username] = user
        return user

    def append_to_wishlist(self, username: str, destination_name: str) -> list[str]:
        user = self._users.get(username)
        if user is None:
            raise UserNotFound(username)
        if destination_name in user.want_to_go:
            raise AlreadyPresent(username, destination_name)
        user.want_to_go.append(destination_name)
        return list(user.want_to_go)
