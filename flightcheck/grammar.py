"""
Line grammar for flight manifests.

Every instruction starts with ``add`` followed by one of five kinds. A coarse
pattern classifies the kind first so that a rejected line gets a message describing
the layout of that particular kind.

By default matching is unanchored (a valid ``add <kind> ...`` substring anywhere in
the line is accepted, trailing text is ignored). ``strict`` anchors the keyword at the
start of the line and requires the kind pattern to cover the whole line.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Pattern, Tuple

from flightcheck.errors import ClassificationError, FormatError
from flightcheck.models import CapturedInstruction, Outcome

_RE_INSTRUCTION = re.compile(r"(add)\s(route|aircraft|general|airline|loyalty)", re.ASCII)

_RE_ROUTE = re.compile(r"(add)\s(route)\s([a-zA-Z]+)\s([a-zA-Z]+)\s(\d+)\s(\d+)\s(\d+)", re.ASCII)
_RE_AIRCRAFT = re.compile(r"(add)\s(aircraft)\s(\S+)\s(\d+)", re.ASCII)
_RE_LOYALTY = re.compile(r"(add)\s(loyalty)\s([a-zA-Z]+)\s(\d{1,3})\s(\d+)\s(TRUE|FALSE)\s(TRUE|FALSE)", re.ASCII)
_RE_PASSENGER = re.compile(r"(add)\s(general|airline)\s(\S+)\s(\d{1,3})", re.ASCII)

# kind -> (pattern, expected layout)
INSTRUCTION_FORMATS: Dict[str, Tuple[Pattern[str], str]] = {
    "route": (
        _RE_ROUTE,
        "A route must meet the format 'add route origin destination cost-per-passenger(n) "
        "ticket-price(n) minimum-takeoff-load-percentage(n)'.",
    ),
    "aircraft": (
        _RE_AIRCRAFT,
        "An aircraft must meet the format 'add aircraft aircraft-title number-of-seats(n)'.",
    ),
    "loyalty": (
        _RE_LOYALTY,
        "An loyalty passenger must meet the format 'add loyalty first-name age(n) "
        "current-loyalty-points(n) using-loyalty-points(b) using-extra-baggage(b)'.",
    ),
    "passenger": (
        _RE_PASSENGER,
        "A passenger must meet the format 'add (general|airline) first-name age(n)'.",
    ),
}


def classify(line: str, strict: bool = False) -> Optional[str]:
    """Return the instruction kind named by the line, or None."""
    match = _RE_INSTRUCTION.match(line) if strict else _RE_INSTRUCTION.search(line)
    return match.group(2) if match else None


def _format_key(kind: str) -> str:
    return kind if kind in ("route", "aircraft", "loyalty") else "passenger"


def validate_instruction(line: str, line_number: int, strict: bool = False) -> Outcome:
    """Validate one raw line; success carries a CapturedInstruction."""
    kind = classify(line, strict=strict)
    if kind is None:
        return Outcome.failure(ClassificationError(line_number))

    pattern, expected = INSTRUCTION_FORMATS[_format_key(kind)]
    match = pattern.fullmatch(line) if strict else pattern.search(line)
    if match is None:
        return Outcome.failure(FormatError(line_number, kind, expected))
    return Outcome.success(CapturedInstruction(line_number=line_number, groups=match.groups()))
