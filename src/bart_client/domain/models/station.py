"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a BART station.

    Other responses reference stations by abbreviation or name only, so every
    field but the abbreviation has an empty default and partial stubs are valid.
    """

    abbreviation: str = ""
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    address: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    zip_code: str = ""
