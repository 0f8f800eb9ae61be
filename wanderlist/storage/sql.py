"""
SQL storage backend.

Persists users through Flask-SQLAlchemy. All operations run inside the
application context of the app the store was created for.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wanderlist.errors import AlreadyPresent, DuplicateUser, StorageUnavailable, UserNotFound
from wanderlist.extensions import db
from wanderlist.models import UserModel, WishlistEntry
from wanderlist.storage.base import User, UserStore, hash_password

logger = logging.getLogger(__name__)


def _to_user(row: UserModel) -> User:
    return User(
        username=row.username,
        password_hash=row.password_hash,
        want_to_go=[entry.destination_name for entry in row.wishlist],
        created_at=row.created_at,
    )


class SQLUserStore(UserStore):
    """User store backed by the ``users`` and ``wishlist_entries`` tables"""

    backend_name = "sql"

    def setup(self) -> None:
        """Check the connection once and create missing tables."""
        try:
            db.session.execute(text('SELECT 1'))
            db.create_all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageUnavailable(str(e)) from e
        logger.info('SQL store ready at %s', db.engine.url.render_as_string(hide_password=True))

    def _get_row(self, username: str) -> Optional[UserModel]:
        return UserModel.query.filter_by(username=username).first()

    def find_user_by_name(self, username: str) -> Optional[User]:
        row = self._get_row(username)
        return _to_user(row) if row else None

    def create_user(self, username: str, password: str) -> User:
        if self._get_row(username):
            raise DuplicateUser(username)

        row = UserModel(username=username, password_hash=hash_password(password))
        try:
            db.session.add(row)
            db.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            db.session.rollback()
            raise DuplicateUser(username) from e
        return _to_user(row)

    def append_to_wishlist(self, username: str, destination_name: str) -> list[str]:
        row = self._get_row(username)
        if row is None:
            raise UserNotFound(username)
        if any(entry.destination_name == destination_name for entry in row.wishlist):
            raise AlreadyPresent(username, destination_name)

        try:
            row.wishlist.append(WishlistEntry(destination_name=destination_name))
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            raise AlreadyPresent(username, destination_name) from e
        return [entry.destination_name for entry in row.wishlist]
