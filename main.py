import argparse
import sys

from flightcheck.config import Settings
from flightcheck.logging_setup import setup_logging
from flightcheck.manifest import run


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate a flight manifest and decide whether the flight can take off."
    )
    parser.add_argument(
        "input",
        help="Instruction file with one 'add <kind> ...' line per route, aircraft, or passenger."
    )
    parser.add_argument(
        "output",
        help="File that receives the summary line when every instruction is valid."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Require each instruction to span the whole line (overrides FLIGHTCHECK_STRICT_GRAMMAR)."
    )
    parser.add_argument(
        "--allow-missing-definitions",
        dest="require_definitions",
        action="store_false",
        default=None,
        help="Do not report a manifest that lacks a route or aircraft line."
    )
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)
    setup_logging()
    settings = Settings.from_env().override(
        strict_grammar=args.strict,
        require_definitions=args.require_definitions,
    )

    try:
        result = run(args.input, args.output, settings)
    except FileNotFoundError as exc:
        parser.error(f"input file not found: {exc}")

    if not result.ok:
        print("\n".join(result.error_messages()))
        return 1

    print(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
