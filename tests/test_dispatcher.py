import pytest

from dispatch.dispatcher import format_suggestions, suggest_for_participants, suggest_for_passengers
from drivers.models import Driver, Participants, Person
from drivers.selection import DegenerateRankingError, suggest_drivers


@pytest.fixture
def passengers():
    return [
        Person.new(59.93, 30.35, person_id="p1"),
        Person.new(59.966847, 30.305679, person_id="p2"),
    ]


@pytest.fixture
def drivers(driver_without_area, driver_excluding_passenger):
    return [driver_excluding_passenger, driver_without_area, Driver.new(59.90, 30.34, driver_id="side")]


def test_suggest_for_passengers_ranks_every_passenger(start_point, passengers, drivers):
    suggestions = suggest_for_passengers(start_point, passengers, drivers)

    assert list(suggestions) == ["p1", "p2"]
    for passenger in passengers:
        assert suggestions[passenger.id] == suggest_drivers(start_point, passenger, drivers)


def test_suggest_for_passengers_accepts_generators(start_point, passengers, drivers):
    suggestions = suggest_for_passengers(start_point, iter(passengers), iter(drivers))

    assert all(len(ranked) == len(drivers) for ranked in suggestions.values())


def test_suggest_for_participants_uses_configured_start_point(monkeypatch, start_point, passengers, drivers):
    monkeypatch.delenv("START_LAT", raising=False)
    monkeypatch.delenv("START_LON", raising=False)
    participants = Participants(passengers=tuple(passengers), drivers=tuple(drivers))

    assert suggest_for_participants(participants) == suggest_for_passengers(start_point, passengers, drivers)


def test_one_bad_driver_fails_the_whole_batch(start_point, passengers, drivers):
    at_start = Driver.new(start_point.latitude, start_point.longitude, driver_id="at_start")

    with pytest.raises(DegenerateRankingError):
        suggest_for_passengers(start_point, passengers, drivers + [at_start])


def test_format_suggestions():
    passenger = Person.new(59.93, 30.35, person_id="p1")
    first = Driver.new(59.94, 30.36)
    second = Driver.new(60.0, 30.0)

    lines = format_suggestions([passenger], {"p1": [first, second]})

    assert lines == [
        "Passenger point: 59.93, 30.35",
        "  59.94, 30.36",
        "  60.0, 30.0",
    ]


def test_duplicate_passenger_ids_are_rejected(start_point, drivers):
    passengers = [
        Person.new(59.93, 30.35, person_id="p1"),
        Person.new(59.966847, 30.305679, person_id="p1"),
    ]

    with pytest.raises(ValueError, match="p1"):
        suggest_for_passengers(start_point, passengers, drivers)
