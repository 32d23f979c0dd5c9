"""Parser for the etd (estimated departures) command response."""

from lxml import etree

from bart_client.adapters.bart_api.raw import RawDeparture, RawEstimate
from bart_client.adapters.bart_api.xml_document import (
    build_raw,
    child_texts,
    parse_flag,
    parse_tolerant_int,
)
from bart_client.domain.models.departure import Departure, Estimate
from bart_client.domain.models.station import Station


class DepartureParser:
    """Parses <etd> elements into Departure objects."""

    @staticmethod
    def parse_departures(root: etree._Element, operation: str) -> list[Departure]:
        """Parse the departures of every station in the document.

        Args:
            root: The <root> element of the response.
            operation: Command name, used in error messages.

        Returns:
            List of Departure objects in document order.
        """
        return [
            DepartureParser._parse_departure(element, operation)
            for element in root.iterfind("station/etd")
        ]

    @staticmethod
    def _parse_departure(element: etree._Element, operation: str) -> Departure:
        """Parse a single <etd> into a Departure with a stub destination Station."""
        raw = build_raw(RawDeparture, child_texts(element), operation)
        estimates = tuple(
            DepartureParser._parse_estimate(estimate, operation)
            for estimate in element.iterfind("estimate")
        )
        return Departure(
            destination=Station(abbreviation=raw.abbreviation, name=raw.destination),
            limited=parse_flag(raw.limited),
            estimates=estimates,
        )

    @staticmethod
    def _parse_estimate(element: etree._Element, operation: str) -> Estimate:
        """Parse a single <estimate>."""
        raw = build_raw(RawEstimate, child_texts(element), operation)
        return Estimate(
            # BART sends words such as "Leaving" when the train is at the platform
            minutes=parse_tolerant_int(raw.minutes),
            platform=raw.platform,
            direction=raw.direction,
            length=raw.length,
            color=raw.color,
            hex_color=raw.hex_color,
            bike_flag=raw.bike_flag,
        )
