"""
Catalog Package

Exports the destination records and lookup helpers.
"""

from wanderlist.catalog.destinations import Category, Destination, DESTINATIONS
from wanderlist.catalog.lookup import (
    all_destinations,
    destinations_in,
    find_by_name,
    find_by_slug,
    resolve_names,
    search,
)

__all__ = [
    'Category',
    'Destination',
    'DESTINATIONS',
    'all_destinations',
    'destinations_in',
    'find_by_name',
    'find_by_slug',
    'resolve_names',
    'search',
]
