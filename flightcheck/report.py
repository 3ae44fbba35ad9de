from __future__ import annotations

from flightcheck.models import Flight

OUTPUT_FIELDS = [
    "total_passengers_count",
    "general_passengers_count",
    "airline_passengers_count",
    "loyalty_passenger_count",
    "baggage_count",
    "loyalty_points_redeemed",
    "total_cost_of_flight",
    "total_revenue",
    "adjusted_revenue",
]


def get_output(flight: Flight) -> str:
    """Render the single summary line for a finalised flight."""
    if flight.totals is None or flight.eligibility is None:
        raise RuntimeError("Flight must be totalled and evaluated before output.")
    tokens = [str(getattr(flight.totals, name)) for name in OUTPUT_FIELDS]
    tokens.append(str(flight.eligibility.can_proceed).upper())
    return " ".join(tokens)
