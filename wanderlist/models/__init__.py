"""
Models Package

Exports all models for easy importing.
"""

from wanderlist.models.user import UserModel, WishlistEntry

__all__ = ['UserModel', 'WishlistEntry']
