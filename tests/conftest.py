import pytest

from drivers.models import Driver, Person
from geometry import Circle, Point


@pytest.fixture
def start_point():
    # The shared start point used by the demo data (Saint Petersburg)
    return Point(59.9815845, 30.2144768)


@pytest.fixture
def passenger():
    return Person.new(59.93, 30.35, person_id="passenger")


@pytest.fixture
def driver_without_area():
    return Driver.new(59.94, 30.36, driver_id="no_area")


@pytest.fixture
def driver_excluding_passenger():
    # 100 m around (59.0, 30.0) is ~105 km away from the passenger
    return Driver.new(60.00, 30.00, Circle(Point(59.0, 30.0), 100), driver_id="excluding")
