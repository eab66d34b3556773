import argparse
import sys

from windowseat import __version__
from windowseat.cli.commands import run_airports, run_doctor, run_route


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windowseat",
        description="Pick the window seat with the best sunrise, sunset or night view.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--config", help="Path to config TOML (default ~/.config/windowseat/config.toml)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "error"],
        help="Enable logging at the given level",
    )

    subparsers = parser.add_subparsers(dest="command")

    route_parser = subparsers.add_parser("route", help="Recommend a window seat for a flight")
    route_parser.add_argument("--from", dest="from_code", required=True, help="Departure airport code (e.g. DEL)")
    route_parser.add_argument("--to", dest="to_code", required=True, help="Arrival airport code (e.g. JAI)")
    route_parser.add_argument(
        "--depart",
        required=True,
        help="Departure time, ISO 8601; naive times are UTC (e.g. 2025-08-01T18:00Z)",
    )
    route_parser.add_argument(
        "--duration",
        help="Flight duration in minutes; enables the sunrise/sunset report",
    )
    route_parser.add_argument("--json", action="store_true", help="Output result as JSON")
    route_parser.add_argument("--verbose", action="store_true", help="Show bearings and the sun timeline")

    airports_parser = subparsers.add_parser("airports", help="List known airports")
    airports_parser.add_argument("--json", action="store_true", help="Output result as JSON")

    doctor_parser = subparsers.add_parser("doctor", help="Run system diagnostics")
    doctor_parser.add_argument("--json", action="store_true", help="Output result as JSON")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"windowseat {__version__}")
        return 0

    if args.command == "route":
        return run_route(args)

    if args.command == "airports":
        return run_airports(args)

    if args.command == "doctor":
        return run_doctor(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
