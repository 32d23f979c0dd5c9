"""Parser for the routes and routeinfo command responses."""

from lxml import etree

from bart_client.adapters.bart_api.raw import RawRoute
from bart_client.adapters.bart_api.xml_document import build_raw, child_texts
from bart_client.domain.models.route import Route
from bart_client.domain.models.station import Station


class RouteParser:
    """Parses <routes> listings into Route objects."""

    @staticmethod
    def parse_routes(root: etree._Element, operation: str) -> list[Route]:
        """Parse every <route> under <routes>."""
        return [
            RouteParser._parse_route(element, operation)
            for element in root.iterfind("routes/route")
        ]

    @staticmethod
    def _parse_route(element: etree._Element, operation: str) -> Route:
        """Parse a single <route>.

        Only routeinfo lists the stations (as abbreviations under <config>);
        they become Station stubs. num_stns is passed through as sent and is
        not checked against the station list.
        """
        fields: dict[str, object] = dict(child_texts(element))
        fields["stations"] = [
            station.text.strip()
            for station in element.iterfind("config/station")
            if station.text and station.text.strip()
        ]
        raw = build_raw(RawRoute, fields, operation)
        return Route(
            name=raw.name,
            abbreviation=raw.abbreviation,
            route_id=raw.route_id,
            number=raw.number,
            color=raw.color,
            hex_color=raw.hex_color,
            holidays=raw.holidays,
            station_count=raw.station_count,
            stations=tuple(Station(abbreviation=abbr) for abbr in raw.stations),
        )
