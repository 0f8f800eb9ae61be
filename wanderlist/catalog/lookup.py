"""
Catalog Lookup

Linear scans over the destination catalog. Enumeration order is category
order, then declaration order within a category.
"""

from wanderlist.catalog.destinations import DESTINATIONS, Category


def all_destinations():
    """Yield every destination in catalog order."""
    for category in Category:
        yield from DESTINATIONS.get(category, ())


def destinations_in(category):
    """Return the destinations of one category."""
    return list(DESTINATIONS.get(Category(category), ()))


def find_by_name(name):
    """Return the first destination whose name matches exactly, or None."""
    for destination in all_destinations():
        if destination.name == name:
            return destination
    return None


def find_by_slug(slug):
    """Return the destination served at ``/<slug>``, or None."""
    slug = (slug or '').lower()
    for destination in all_destinations():
        if destination.slug == slug:
            return destination
    return None


def search(query):
    """Case-insensitive substring search on destination names.

    An empty query matches nothing. Results keep catalog order.
    """
    if not query:
        return []
    needle = query.lower()
    return [d for d in all_destinations() if needle in d.name.lower()]


def resolve_names(names):
    """Map a want-to-go list to destinations, skipping unknown names."""
    resolved = []
    for name in names:
        destination = find_by_name(name)
        if destination is not None:
            resolved.append(destination)
    return resolved
