import logging
import os

from dispatch.dispatcher import format_suggestions, suggest_for_participants
from drivers.models import Driver, Participants, Person
from drivers.policy import policy_from_env
from geometry import Circle, Point, polygon_of


def sample_participants() -> Participants:
    passengers = (
        Person.new(59.930000, 30.350000, person_id="p1"),
        Person.new(59.966847, 30.305679, person_id="p2"),
        Person.new(60.010000, 30.250000, person_id="p3"),
    )

    drivers = (
        Driver.new(59.940000, 30.360000, driver_id="d1"),  # no preferred area
        Driver.new(60.000000, 30.000000, Circle(Point(59.0, 30.0), 100), driver_id="d2"),
        Driver.new(
            59.950147, 30.418632,
            polygon_of(
                Point(59.90, 30.25),
                Point(59.90, 30.45),
                Point(60.00, 30.45),
                Point(60.00, 30.25),
            ),
            driver_id="d3",
        ),
        Driver.new(60.050000, 30.300000, Circle(Point(60.02, 30.26), 3000), driver_id="d4"),
    )

    return Participants(passengers=passengers, drivers=drivers)


def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

    participants = sample_participants()
    suggestions = suggest_for_participants(participants, policy=policy_from_env())

    print(f"\nSuggestions for {len(participants.passengers)} passengers:\n")
    for line in format_suggestions(participants.passengers, suggestions):
        print(line)


if __name__ == "__main__":
    main()
