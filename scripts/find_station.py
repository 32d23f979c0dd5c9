#!/usr/bin/env python3
"""Helper script to find BART station abbreviations."""

import asyncio
import sys

import aiohttp

from bart_client.adapters.bart_api import (
    BartDepartureRepository,
    BartHttpClient,
    BartStationRepository,
)
from bart_client.domain.models import Departure, Station


def _print_station_info(station: Station) -> None:
    """Print station information."""
    print("\nFound station:")
    print(f"  Abbreviation: {station.abbreviation}")
    print(f"  Name: {station.name}")
    print(f"  Address: {station.address}, {station.city} {station.zip_code}")
    print(f"  Coordinates: {station.latitude}, {station.longitude}")


def _print_sample_destinations(departures: list[Departure]) -> None:
    """Print the destinations served from the station."""
    print("\nDestinations:")
    for departure in departures:
        colors = sorted({estimate.color for estimate in departure.estimates})
        print(f"  → {departure.destination.name} ({', '.join(colors)})")


async def find_station(name: str) -> None:
    """Find a station by (part of) its name."""
    print(f"Searching for: {name}")

    async with aiohttp.ClientSession() as session:
        client = BartHttpClient(session)
        stations = await BartStationRepository(client).get_all_stations()
        matches = [s for s in stations if name.lower() in s.name.lower()]
        if not matches:
            print(f"Station not found: {name}")
            sys.exit(1)

        for station in matches:
            _print_station_info(station)

        print("\nFetching departures...")
        departures = await BartDepartureRepository(client).get_departures_by_station(matches[0])
        if departures:
            _print_sample_destinations(departures)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_station.py <station_name>")
        print('Example: python find_station.py "Embarcadero"')
        sys.exit(1)

    asyncio.run(find_station(sys.argv[1]))
