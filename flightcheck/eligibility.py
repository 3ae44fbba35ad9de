from __future__ import annotations

import math

from flightcheck.models import Eligibility, Flight


def load_fraction(passengers: int, seats: int) -> float:
    """Booked share of the cabin; a seatless aircraft is infinitely full once anyone boards."""
    if seats:
        return passengers / seats
    return math.inf if passengers else math.nan


def can_the_flight_proceed(flight: Flight) -> Eligibility:
    """Evaluate seats, revenue and load checks; every check is computed and kept."""
    if flight.totals is None:
        raise RuntimeError("Flight totals must be computed before eligibility.")
    if flight.route is None or flight.aircraft is None:
        raise ValueError("Cannot evaluate a flight without a route and an aircraft.")

    totals = flight.totals
    seats = flight.aircraft.number_of_seats

    percentage_booked = load_fraction(totals.total_passengers_count, seats)
    meets_seats = totals.total_passengers_count <= seats
    # Break-even and an exactly met threshold both fail.
    meets_revenue = totals.total_cost_of_flight < totals.adjusted_revenue
    meets_percentage = (percentage_booked * 100) > flight.route.minimum_takeoff_load_percentage

    eligibility = Eligibility(
        percentage_booked=percentage_booked,
        meets_seats=meets_seats,
        meets_revenue=meets_revenue,
        meets_percentage=meets_percentage,
    )
    flight.attach_eligibility(eligibility)
    return eligibility
