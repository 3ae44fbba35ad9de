"""Turn validated instruction lines into records and fold them into a Flight."""

from __future__ import annotations

from flightcheck.errors import DuplicateDefinitionError
from flightcheck.models import (
    Aircraft,
    CapturedInstruction,
    Flight,
    LoyaltyPassenger,
    Outcome,
    Passenger,
    Record,
    Route,
)


def _flag(value: str) -> bool:
    return value == "TRUE"


def build_record(captured: CapturedInstruction) -> Record:
    values = captured.values
    kind = captured.kind

    if kind == "route":
        origin, destination, cost, price, minimum_load = values[:5]
        return Route(
            origin=origin,
            destination=destination,
            cost_per_passenger=int(cost),
            ticket_price=int(price),
            minimum_takeoff_load_percentage=int(minimum_load),
        )
    if kind == "aircraft":
        title, seats = values[:2]
        return Aircraft(title=title, number_of_seats=int(seats))
    if kind == "loyalty":
        first_name, age, points, using_points, extra_baggage = values[:5]
        return LoyaltyPassenger(
            passenger=Passenger(first_name=first_name, age=int(age), is_loyal=True, is_general=False),
            current_loyalty_points=int(points),
            using_loyalty_points=_flag(using_points),
            using_extra_baggage=_flag(extra_baggage),
        )

    first_name, age = values[:2]
    return Passenger(first_name=first_name, age=int(age), is_loyal=False, is_general=kind == "general")


def parse_instruction(flight: Flight, captured: CapturedInstruction) -> Outcome:
    """
    Fold one validated instruction into ``flight``.

    The first route and aircraft win; a repeat is reported against its own line
    and leaves the flight untouched.
    """
    record = build_record(captured)

    if isinstance(record, Route):
        if flight.route is not None:
            return Outcome.failure(DuplicateDefinitionError(captured.line_number, "route"))
        flight.route = record
    elif isinstance(record, Aircraft):
        if flight.aircraft is not None:
            return Outcome.failure(DuplicateDefinitionError(captured.line_number, "aircraft"))
        flight.aircraft = record
    elif isinstance(record, LoyaltyPassenger):
        flight.loyalty_passengers.append(record)
    else:
        flight.passengers.append(record)
    return Outcome.success(record)
