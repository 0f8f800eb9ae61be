"""
Abstract base classes for user storage backends.

Every backend implements the same small contract so the rest of the
application never needs to know which one is active.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password, method='pbkdf2:sha256')


@dataclass
class User(UserMixin):
    """
    A registered user as seen by the web layer.

    Backends convert their own rows/documents into this record.
    Flask-Login identifies users by username.
    """
    username: str
    password_hash: str
    want_to_go: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def get_id(self) -> str:
        return self.username

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a document for serialization."""
        return {
            "username": self.username,
            "password_hash": self.password_hash,
            "want_to_go": list(self.want_to_go),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Create from a stored document."""
        return cls(
            username=data["username"],
            password_hash=data["password_hash"],
            want_to_go=list(data.get("want_to_go") or []),
            created_at=data.get("created_at") or datetime.utcnow(),
        )


class UserStore(ABC):
    """
    Contract for user persistence.

    Implementations are chosen once at startup by
    ``wanderlist.storage.factory.create_user_store`` and attached to the app.
    None of the operations are transactional: a read followed by a write
    may race with another request for the same user.
    """

    backend_name = "abstract"

    def setup(self) -> None:
        """
        Prepare the backend (connect, create tables/indexes).

        Raises StorageUnavailable when the backend cannot be reached.
        Must be idempotent.
        """

    def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Return the user if the username exists and the password matches."""
        user = self.find_user_by_name(username)
        if user is None or not user.check_password(password):
            return None
        return user

    @abstractmethod
    def find_user_by_name(self, username: str) -> Optional[User]:
        """Exact, case-sensitive lookup by username."""

    @abstractmethod
    def create_user(self, username: str, password: str) -> User:
        """
        Store a new user with an empty want-to-go list.

        Raises DuplicateUser if the username is taken.
        """

    @abstractmethod
    def append_to_wishlist(self, username: str, destination_name: str) -> list[str]:
        """
        Append a destination to the user's want-to-go list.

        Raises AlreadyPresent if it is already listed and UserNotFound
        for an unknown user. Returns the updated list.
        """

    def get_wishlist(self, username: str) -> list[str]:
        """Return the user's want-to-go list, empty for unknown users."""
        user = self.find_user_by_name(username)
        return list(user.want_to_go) if user else []

    def close(self) -> None:
        """Release connections, if any."""
