"""Raw intermediate shapes mirroring the BART XML documents.

Fields keep the upstream names (through aliases) and loose types. Anything
needing judgement (tolerant numbers, flags, timestamps, sentinels) stays a
string here and is normalized by the parsers.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    """Base for raw document shapes."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class RawStation(RawModel):
    """<station> of the stns command."""

    abbreviation: str = Field(default="", alias="abbr")
    name: str = ""
    latitude: float = Field(default=0.0, alias="gtfs_latitude")
    longitude: float = Field(default=0.0, alias="gtfs_longitude")
    address: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    zip_code: str = Field(default="", alias="zipcode")


class RawEstimate(RawModel):
    """<estimate> of the etd command."""

    minutes: str = ""
    platform: int = 0
    direction: str = ""
    length: int = 0
    color: str = ""
    hex_color: str = Field(default="", alias="hexcolor")
    bike_flag: str = Field(default="", alias="bikeflag")


class RawDeparture(RawModel):
    """<etd> of the etd command, without its estimates."""

    destination: str = ""
    abbreviation: str = ""
    limited: str = ""


class RawRoute(RawModel):
    """<route> of the routes and routeinfo commands."""

    name: str = ""
    abbreviation: str = Field(default="", alias="abbr")
    route_id: str = Field(default="", alias="routeID")
    number: int = 0
    color: str = ""
    hex_color: str = Field(default="", alias="hexcolor")
    holidays: int = 0
    station_count: int = Field(default=0, alias="num_stns")
    stations: list[str] = Field(default_factory=list)


class RawSchedule(RawModel):
    """<schedule> attributes of the scheds command."""

    number: int = Field(default=0, alias="id")
    effective_date: str = Field(default="", alias="effectivedate")


class RawRouteSchedule(RawModel):
    """Top level fields of the routesched command."""

    number: int = Field(default=0, alias="sched_num")
    message: str | None = None


class RawTrainSchedule(RawModel):
    """<train> attributes of the routesched command."""

    index: int = 0


class RawScheduledStop(RawModel):
    """<stop> attributes of the routesched command."""

    station: str = ""
    time: str = Field(default="", alias="origTime")
    bike_flag: str = Field(default="", validation_alias=AliasChoices("bikeflag", "bikeFlag"))


class RawStationSchedule(RawModel):
    """Top level fields of the stnsched command."""

    date: str = ""
    number: int = Field(default=0, alias="sched_num")
    name: str = ""
    abbreviation: str = Field(default="", alias="abbr")


class RawTrain(RawModel):
    """<item> attributes of the stnsched command."""

    line: str = ""
    head_station: str = Field(default="", alias="trainHeadStation")
    origin_time: str = Field(default="", alias="origTime")
    destination_time: str = Field(default="", alias="destTime")
    index: int = Field(default=0, alias="trainIdx")
    bike_flag: str = Field(default="", validation_alias=AliasChoices("bikeflag", "bikeFlag"))


class RawAdvisory(RawModel):
    """<bsa> of the bsa and elev commands."""

    id: int = 0
    station: str = ""
    type: str = ""
    description: str = ""
    sms_text: str = ""
    posted: str = ""
    expires: str = ""


class RawTrainCount(RawModel):
    """Top level fields of the count command."""

    train_count: int = Field(default=0, alias="traincount")
