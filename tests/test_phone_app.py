"""Tests for the popularity-ranked phone app guide."""

import pytest

from rome_tour.guides.base import ConstructionError
from rome_tour.guides.phone_app import PhoneApp
from rome_tour.schemas.location_schema import Location


def _names(guide, limit=None):
    names = []
    while guide.has_next() and (limit is None or len(names) < limit):
        names.append(guide.next().name)
    return names


def test_phone_app_top_three_in_rome(rome_places):
    for _ in range(3):
        guide = PhoneApp(rome_places, narrator=lambda line: None)
        assert _names(guide, limit=3) == ["Colosseum", "Vatican", "Trevi Fountain"]


def test_phone_app_moves_famous_places_forward_and_keeps_the_rest_stable():
    places = [
        Location(name="Pantheon", category="ancient"),
        Location(name="Trevi Fountain", category="fountain"),
        Location(name="Spanish Steps", category="stairs"),
        Location(name="Vatican", category="religious"),
        Location(name="Piazza Navona", category="square"),
        Location(name="Colosseum", category="ancient"),
    ]

    names = _names(PhoneApp(places, narrator=lambda line: None))

    assert names == [
        "Colosseum",
        "Vatican",
        "Trevi Fountain",
        "Pantheon",
        "Spanish Steps",
        "Piazza Navona",
    ]


def test_phone_app_without_famous_places_keeps_original_order():
    places = [Location(name=n) for n in ("Ostia", "Appia", "Borghese")]

    assert _names(PhoneApp(places, narrator=lambda line: None)) == ["Ostia", "Appia", "Borghese"]


def test_phone_app_accepts_custom_priority(rome_places):
    guide = PhoneApp(rome_places, priority=("Spanish Steps", "Pantheon"), narrator=lambda line: None)

    assert _names(guide) == ["Spanish Steps", "Pantheon", "Colosseum", "Vatican", "Trevi Fountain"]


def test_phone_app_does_not_reorder_shared_places(rome_places):
    reversed_places = list(reversed(rome_places))
    snapshot = list(reversed_places)

    _names(PhoneApp(reversed_places, narrator=lambda line: None))

    assert reversed_places == snapshot


def test_phone_app_narration(rome_places):
    lines = []
    guide = PhoneApp(rome_places, narrator=lines.append)

    guide.next()

    assert lines == ["📱 App suggests: Colosseum (popular destination)"]


def test_phone_app_exhaustion_is_not_an_error(rome_places):
    guide = PhoneApp(rome_places, narrator=lambda line: None)
    assert len(_names(guide)) == 5

    assert guide.has_next() is False
    assert guide.next() is None
    assert guide.next() is None


def test_phone_app_rejects_empty_places():
    with pytest.raises(ConstructionError, match="PhoneApp"):
        PhoneApp([])
