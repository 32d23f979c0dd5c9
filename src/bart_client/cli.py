"""CLI helpers for querying the BART API."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Any

import aiohttp

from bart_client.adapters.bart_api import (
    BartAdvisoryRepository,
    BartDepartureRepository,
    BartHttpClient,
    BartRouteRepository,
    BartScheduleRepository,
    BartStationRepository,
)
from bart_client.adapters.config import BartConfig
from bart_client.domain.errors import BartApiError
from bart_client.domain.models import Departure, ServiceAdvisory, Station

logger = logging.getLogger(__name__)


def to_json(value: Any) -> str:
    """Serialize domain objects (or lists of them) to JSON."""

    def convert(item: Any) -> Any:
        if is_dataclass(item) and not isinstance(item, type):
            return asdict(item)
        return item

    data = [convert(item) for item in value] if isinstance(value, list) else convert(value)
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_departure(departure: Departure) -> str:
    """Format a departure as a single line, e.g. 'Richmond (RICH): 3, 18, 33 min'."""
    minutes = ", ".join(
        "Leaving" if estimate.minutes == 0 else str(estimate.minutes)
        for estimate in departure.estimates
    )
    limited = " [limited]" if departure.limited else ""
    destination = departure.destination
    return f"{destination.name} ({destination.abbreviation}){limited}: {minutes} min"


def format_advisory(advisory: ServiceAdvisory) -> str:
    """Format an advisory as a single line."""
    kind = advisory.type.value if advisory.type else "INFO"
    posted = f" (posted {advisory.posted:%Y-%m-%d %H:%M %Z})" if advisory.posted else ""
    return f"[{kind}] {advisory.sms_text or advisory.description}{posted}"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the bart-client command."""
    parser = argparse.ArgumentParser(
        description="BART API Helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all stations
  bart-client stations

  # Show real-time departures from Embarcadero
  bart-client departures EMBR

  # Show service advisories
  bart-client advisories
        """,
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("stations", help="List all stations")

    departures_parser = subparsers.add_parser("departures", help="Show real-time departures")
    departures_parser.add_argument("station", help="Station abbreviation (e.g., EMBR) or ALL")

    subparsers.add_parser("advisories", help="Show service advisories")
    subparsers.add_parser("elevators", help="Show elevator advisories")
    subparsers.add_parser("count", help="Count trains currently in service")

    routes_parser = subparsers.add_parser("routes", help="List current routes")
    routes_parser.add_argument(
        "--stations", action="store_true", help="Include the station list of each route"
    )

    subparsers.add_parser("schedules", help="List current schedules")

    return parser


async def run_command(args: argparse.Namespace, client: BartHttpClient) -> None:
    """Run a parsed command against the BART API and print the result."""
    if args.command == "stations":
        stations = await BartStationRepository(client).get_all_stations()
        if args.json:
            print(to_json(stations))
            return
        for station in stations:
            print(f"  {station.abbreviation:<5} {station.name} ({station.city})")

    elif args.command == "departures":
        station = Station(abbreviation=args.station.upper())
        departures = await BartDepartureRepository(client).get_departures_by_station(station)
        if args.json:
            print(to_json(departures))
            return
        if not departures:
            print(f"No departures found for '{station.abbreviation}'", file=sys.stderr)
            return
        for departure in departures:
            print(f"  {format_departure(departure)}")

    elif args.command in ("advisories", "elevators"):
        repository = BartAdvisoryRepository(client)
        if args.command == "advisories":
            advisories = await repository.get_service_advisories()
        else:
            advisories = await repository.get_elevator_advisories()
        if args.json:
            print(to_json(advisories))
            return
        if not advisories:
            print("Nothing to report.")
            return
        for advisory in advisories:
            print(f"  {format_advisory(advisory)}")

    elif args.command == "count":
        count = await BartAdvisoryRepository(client).get_train_count()
        print(json.dumps({"train_count": count}) if args.json else count)

    elif args.command == "routes":
        repository = BartRouteRepository(client)
        if args.stations:
            routes = await repository.get_all_route_info()
        else:
            routes = await repository.get_current_routes()
        if args.json:
            print(to_json(routes))
            return
        for route in routes:
            print(f"  {route.number:>3} {route.name} ({route.color})")
            if route.stations:
                print(f"      {' -> '.join(s.abbreviation for s in route.stations)}")

    elif args.command == "schedules":
        schedules = await BartScheduleRepository(client).get_current_schedules()
        if args.json:
            print(to_json(schedules))
            return
        for schedule in schedules:
            print(f"  #{schedule.number} effective {schedule.effective_date:%Y-%m-%d %H:%M}")


async def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = BartConfig()
    try:
        async with aiohttp.ClientSession() as session:
            await run_command(args, BartHttpClient(session, config))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except BartApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
