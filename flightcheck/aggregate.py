from __future__ import annotations

import pandas as pd

from flightcheck.models import Flight, FlightTotals

MANIFEST_COLUMNS = [
    "First Name",
    "Age",
    "Loyal",
    "General",
    "Loyalty Points",
    "Redeeming Points",
    "Extra Baggage",
]


def manifest_frame(flight: Flight) -> pd.DataFrame:
    """One row per person aboard, general/airline passengers first, then loyalty members."""
    rows = []
    for passenger in flight.passengers:
        rows.append({
            "First Name": passenger.first_name,
            "Age": passenger.age,
            "Loyal": False,
            "General": passenger.is_general,
            "Loyalty Points": 0,
            "Redeeming Points": False,
            "Extra Baggage": False,
        })
    for member in flight.loyalty_passengers:
        rows.append({
            "First Name": member.passenger.first_name,
            "Age": member.passenger.age,
            "Loyal": True,
            "General": False,
            "Loyalty Points": member.current_loyalty_points,
            "Redeeming Points": member.using_loyalty_points,
            "Extra Baggage": member.using_extra_baggage,
        })
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def process_flight(flight: Flight) -> FlightTotals:
    """
    Compute the count and monetary totals and attach them to the flight.

    Counts come first, then money. Adjusted revenue drops the ticket revenue of
    airline-booked passengers and the redeemed loyalty points, taken one point
    per currency unit.
    """
    if flight.route is None:
        raise ValueError("Cannot total a flight without a route.")

    frame = manifest_frame(flight)
    loyal = frame["Loyal"].eq(True)
    regular = frame["Loyal"].eq(False)

    total_passengers = len(frame)
    general_passengers = int((regular & frame["General"].eq(True)).sum())
    airline_passengers = int((regular & frame["General"].eq(False)).sum())
    loyalty_passengers = int(loyal.sum())
    baggage = total_passengers + int((loyal & frame["Extra Baggage"].eq(True)).sum())
    redeemed = int(frame.loc[loyal & frame["Redeeming Points"].eq(True), "Loyalty Points"].sum())

    route = flight.route
    total_cost = route.cost_per_passenger * total_passengers
    total_revenue = route.ticket_price * total_passengers
    adjusted_revenue = total_revenue - redeemed - (airline_passengers * route.ticket_price)

    totals = FlightTotals(
        total_passengers_count=total_passengers,
        general_passengers_count=general_passengers,
        airline_passengers_count=airline_passengers,
        loyalty_passenger_count=loyalty_passengers,
        baggage_count=baggage,
        loyalty_points_redeemed=redeemed,
        total_cost_of_flight=total_cost,
        total_revenue=total_revenue,
        adjusted_revenue=adjusted_revenue,
    )
    flight.attach_totals(totals)
    return totals
