"""
Drive a manifest file through validation, parsing and the takeoff decision.

The whole file is always scanned so every bad line is reported in one pass. Totals,
eligibility and the output file are only produced when no line was rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from flightcheck.aggregate import process_flight
from flightcheck.config import Settings
from flightcheck.eligibility import can_the_flight_proceed
from flightcheck.errors import InstructionError, MissingDefinitionError
from flightcheck.grammar import validate_instruction
from flightcheck.models import Flight
from flightcheck.parser import parse_instruction
from flightcheck.report import get_output

logger = logging.getLogger(__name__)


@dataclass
class ManifestResult:
    flight: Flight
    errors: List[InstructionError] = field(default_factory=list)
    output: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_messages(self) -> List[str]:
        return [str(error) for error in self.errors]


def read_manifest(lines: Iterable[str], settings: Optional[Settings] = None) -> ManifestResult:
    """Validate and parse every line into a fresh Flight, collecting all errors."""
    settings = settings or Settings()
    result = ManifestResult(flight=Flight())

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        outcome = validate_instruction(line, line_number, strict=settings.strict_grammar)
        if outcome.ok:
            outcome = parse_instruction(result.flight, outcome.value)
        if not outcome.ok:
            logger.debug(
                "Rejected instruction line",
                extra={"line_number": line_number, "instruction": line},
            )
            result.errors.append(outcome.error)

    if settings.require_definitions:
        if result.flight.route is None:
            result.errors.append(MissingDefinitionError("route"))
        if result.flight.aircraft is None:
            result.errors.append(MissingDefinitionError("aircraft"))
    return result


def evaluate_flight(flight: Flight) -> str:
    process_flight(flight)
    can_the_flight_proceed(flight)
    return get_output(flight)


def run(input_path: str | Path, output_path: str | Path, settings: Optional[Settings] = None) -> ManifestResult:
    """Process ``input_path``; write the summary line to ``output_path`` only if every line was valid."""
    settings = settings or Settings.from_env()
    input_path = Path(input_path)
    output_path = Path(output_path)
    logger.info(
        "Reading flight manifest",
        extra={"input_path": str(input_path), "output_path": str(output_path)},
    )

    if not input_path.exists():
        raise FileNotFoundError(input_path)
    with input_path.open("r", encoding=settings.encoding, newline="", errors="replace") as handle:
        result = read_manifest(handle, settings)
    logger.info("completed reading file", extra={"error_count": len(result.errors)})

    if not result.ok:
        return result

    result.output = evaluate_flight(result.flight)
    output_path.write_text(result.output, encoding=settings.encoding)
    logger.info(
        "Wrote flight summary",
        extra={"output_path": str(output_path)},
    )
    return result
