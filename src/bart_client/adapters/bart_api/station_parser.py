"""Parser for the stns command response."""

from lxml import etree

from bart_client.adapters.bart_api.raw import RawStation
from bart_client.adapters.bart_api.xml_document import build_raw, child_texts
from bart_client.domain.models.station import Station


class StationParser:
    """Parses <stations> listings into Station objects."""

    @staticmethod
    def parse_stations(root: etree._Element, operation: str) -> list[Station]:
        """Parse every <station> under <stations>."""
        return [
            StationParser._parse_station(element, operation)
            for element in root.iterfind("stations/station")
        ]

    @staticmethod
    def _parse_station(element: etree._Element, operation: str) -> Station:
        raw = build_raw(RawStation, child_texts(element), operation)
        return Station(
            abbreviation=raw.abbreviation,
            name=raw.name,
            latitude=raw.latitude,
            longitude=raw.longitude,
            address=raw.address,
            city=raw.city,
            county=raw.county,
            state=raw.state,
            zip_code=raw.zip_code,
        )
