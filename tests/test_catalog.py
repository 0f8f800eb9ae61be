from wanderlist.catalog import (
    Category,
    all_destinations,
    destinations_in,
    find_by_name,
    find_by_slug,
    resolve_names,
    search,
)


def test_catalog_names_and_slugs_are_unique():
    destinations = list(all_destinations())
    assert len(destinations) == 6
    assert len({d.name for d in destinations}) == len(destinations)
    assert len({d.slug for d in destinations}) == len(destinations)


def test_catalog_order_follows_categories():
    names = [d.name for d in all_destinations()]
    assert names == ['Santorini', 'Bali', 'Annapurna', 'Inca Trail', 'Paris', 'Rome']


def test_find_by_name_is_exact():
    paris = find_by_name('Paris')
    assert paris is not None
    assert paris.category == Category.CITIES
    assert find_by_name('paris') is None
    assert find_by_name('Par') is None


def test_find_by_slug():
    assert find_by_slug('inca').name == 'Inca Trail'
    assert find_by_slug('ROME').name == 'Rome'
    assert find_by_slug('atlantis') is None


def test_search_par_returns_only_paris():
    results = search('par')
    assert [d.name for d in results] == ['Paris']


def test_search_is_case_insensitive_and_ordered():
    assert [d.name for d in search('A')] == ['Santorini', 'Bali', 'Annapurna', 'Inca Trail', 'Paris']
    assert [d.name for d in search('TRAIL')] == ['Inca Trail']


def test_search_empty_query_returns_nothing():
    assert search('') == []
    assert search(None) == []


def test_search_without_match():
    assert search('zzz') == []


def test_destinations_in_category():
    assert [d.name for d in destinations_in(Category.MOUNTAINS)] == ['Annapurna', 'Inca Trail']
    assert [d.name for d in destinations_in('beaches')] == ['Santorini', 'Bali']


def test_category_from_slug_accepts_aliases():
    assert Category.from_slug('islands') == Category.BEACHES
    assert Category.from_slug('hiking') == Category.MOUNTAINS
    assert Category.from_slug('cities') == Category.CITIES
    assert Category.from_slug('Mountains') == Category.MOUNTAINS
    assert Category.from_slug('paris') is None


def test_resolve_names_keeps_order_and_skips_unknown():
    resolved = resolve_names(['Rome', 'Atlantis', 'Bali'])
    assert [d.name for d in resolved] == ['Rome', 'Bali']
