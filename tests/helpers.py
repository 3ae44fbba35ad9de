from pathlib import Path

from flightcheck.manifest import read_manifest

SCENARIO_A = [
    "add route LON PAR 50 100 60",
    "add aircraft A320 2",
    "add general Alice 30",
    "add general Bob 40",
]

SCENARIO_B = [
    "add route LON PAR 50 100 60",
    "add aircraft A320 2",
    "add general Alice 30",
]

MIXED_MANIFEST = [
    "add route London Dublin 100 150 75",
    "add aircraft Gulfstream-G550 8",
    "add general Mark 35",
    "add general Tom 15",
    "add general James 72",
    "add airline Trevor 54",
    "add loyalty Alan 65 50 FALSE FALSE",
    "add loyalty Susie 21 40 TRUE FALSE",
    "add loyalty Joan 56 100 TRUE TRUE",
    "add general Jack 50",
]


def write_manifest(directory: Path, lines, name="input.txt") -> Path:
    """Write manifest lines to a file the way an operator would save them."""
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def parsed_flight(lines, settings=None):
    """Read manifest lines and return the populated flight, failing on any error."""
    result = read_manifest(lines, settings)
    assert result.errors == [], result.error_messages()
    return result.flight
