"""Typed records for a single flight manifest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from flightcheck.errors import InstructionError


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., description="Origin city or airport, letters only.")
    destination: str = Field(..., description="Destination city or airport, letters only.")
    cost_per_passenger: int = Field(..., ge=0)
    ticket_price: int = Field(..., ge=0)
    minimum_takeoff_load_percentage: int = Field(..., ge=0)


class Aircraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    number_of_seats: int = Field(..., ge=0)


class Passenger(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    age: int = Field(..., ge=0, le=999)
    is_loyal: bool = False
    is_general: bool = False


class LoyaltyPassenger(BaseModel):
    model_config = ConfigDict(frozen=True)

    passenger: Passenger
    current_loyalty_points: int = Field(..., ge=0)
    using_loyalty_points: bool = False
    using_extra_baggage: bool = False


Record = Union[Route, Aircraft, Passenger, LoyaltyPassenger]


@dataclass(frozen=True)
class FlightTotals:
    total_passengers_count: int
    general_passengers_count: int
    airline_passengers_count: int
    loyalty_passenger_count: int
    baggage_count: int
    loyalty_points_redeemed: int
    total_cost_of_flight: int
    total_revenue: int
    adjusted_revenue: int


@dataclass(frozen=True)
class Eligibility:
    percentage_booked: float
    meets_seats: bool
    meets_revenue: bool
    meets_percentage: bool

    @property
    def can_proceed(self) -> bool:
        return self.meets_revenue and self.meets_percentage and self.meets_seats


@dataclass
class Flight:
    """Accumulator filled line by line, finalised once after the whole file is read."""

    route: Optional[Route] = None
    aircraft: Optional[Aircraft] = None
    passengers: List[Passenger] = field(default_factory=list)
    loyalty_passengers: List[LoyaltyPassenger] = field(default_factory=list)
    totals: Optional[FlightTotals] = None
    eligibility: Optional[Eligibility] = None

    def attach_totals(self, totals: FlightTotals) -> None:
        if self.totals is not None:
            raise RuntimeError("Flight totals have already been computed.")
        self.totals = totals

    def attach_eligibility(self, eligibility: Eligibility) -> None:
        if self.totals is None:
            raise RuntimeError("Flight totals must be computed before eligibility.")
        if self.eligibility is not None:
            raise RuntimeError("Flight eligibility has already been evaluated.")
        self.eligibility = eligibility


@dataclass(frozen=True)
class CapturedInstruction:
    """Captured groups of a validated line; groups[0] is 'add' and groups[1] the kind."""

    line_number: int
    groups: Tuple[str, ...]

    @property
    def kind(self) -> str:
        return self.groups[1]

    @property
    def values(self) -> Tuple[str, ...]:
        return self.groups[2:]


@dataclass(frozen=True)
class Outcome:
    value: Any = None
    error: Optional[InstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InstructionError) -> "Outcome":
        return cls(error=error)
