"""
User Models

SQL tables backing the SQL user store.
"""

from datetime import datetime

from wanderlist.extensions import db


class UserModel(db.Model):
    """Registered user"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Insertion order is list order
    wishlist = db.relationship('WishlistEntry', backref='user', lazy=True,
                               order_by='WishlistEntry.id',
                               cascade='all, delete-orphan')

    def __repr__(self):
        return f'<UserModel {self.username}>'


class WishlistEntry(db.Model):
    """One destination on a user's want-to-go list"""
    __tablename__ = 'wishlist_entries'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'destination_name', name='uq_wishlist_user_destination'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    destination_name = db.Column(db.String(100), nullable=False)
    added_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<WishlistEntry User:{self.user_id} {self.destination_name}>'
