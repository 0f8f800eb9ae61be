"""
Destination Catalog

The fixed set of destinations shown on the site, grouped by category.
"""

from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    """Destination categories, in display order"""
    BEACHES = 'beaches'
    MOUNTAINS = 'mountains'
    CITIES = 'cities'

    @property
    def label(self):
        return CATEGORY_LABELS[self]

    @classmethod
    def from_slug(cls, slug):
        """Resolve a category page slug, including the legacy page names.

        Returns None for anything that is not a category.
        """
        slug = (slug or '').lower()
        if slug in CATEGORY_ALIASES:
            return CATEGORY_ALIASES[slug]
        try:
            return cls(slug)
        except ValueError:
            return None


CATEGORY_LABELS = {
    Category.BEACHES: 'Islands & Beaches',
    Category.MOUNTAINS: 'Hiking',
    Category.CITIES: 'Cities',
}

CATEGORY_ALIASES = {
    'islands': Category.BEACHES,
    'hiking': Category.MOUNTAINS,
}


@dataclass(frozen=True)
class Destination:
    """A single catalog entry"""
    name: str
    slug: str
    description: str
    image: str
    video: str
    category: Category


DESTINATIONS = {
    Category.BEACHES: (
        Destination(
            name='Santorini',
            slug='santorini',
            description='Santorini is one of the Cyclades islands in the Aegean Sea. It was devastated '
                        'by a volcanic eruption in the 16th century BC, forever shaping its rugged landscape.',
            image='santorini.png',
            video='https://www.youtube.com/embed/m5dKGNEmwG8',
            category=Category.BEACHES,
        ),
        Destination(
            name='Bali',
            slug='bali',
            description='Bali is a province of Indonesia and the westernmost of the Lesser Sunda Islands. '
                        'Located east of Java and west of Lombok.',
            image='bali.png',
            video='https://www.youtube.com/embed/w_T6XQYn5qE',
            category=Category.BEACHES,
        ),
    ),
    Category.MOUNTAINS: (
        Destination(
            name='Annapurna',
            slug='annapurna',
            description='Annapurna is a massif in the Himalayas in north-central Nepal that includes '
                        'one peak over 8,000 metres.',
            image='annapurna.png',
            video='https://www.youtube.com/embed/YQq_7s4vs-I',
            category=Category.MOUNTAINS,
        ),
        Destination(
            name='Inca Trail',
            slug='inca',
            description='The Inca Trail to Machu Picchu is a hiking trail in Peru that terminates '
                        'at Machu Picchu.',
            image='inca.png',
            video='https://www.youtube.com/embed/61-U40hW6u0',
            category=Category.MOUNTAINS,
        ),
    ),
    Category.CITIES: (
        Destination(
            name='Paris',
            slug='paris',
            description='Paris, France capital, is a major European city and a global center for art, '
                        'fashion, gastronomy and culture.',
            image='paris.png',
            video='https://www.youtube.com/embed/AQ6GmpMu5L8',
            category=Category.CITIES,
        ),
        Destination(
            name='Rome',
            slug='rome',
            description='Rome is the capital city of Italy. It is also the capital of the Lazio region.',
            image='rome.png',
            video='https://www.youtube.com/embed/cllSeOG8S7s',
            category=Category.CITIES,
        ),
    ),
}
