"""Parser for the scheds, routesched and stnsched command responses."""

from datetime import time

from lxml import etree

from bart_client.adapters.bart_api.constants import CLOCK_TIME_FORMAT, EFFECTIVE_DATE_FORMAT
from bart_client.adapters.bart_api.raw import (
    RawRouteSchedule,
    RawSchedule,
    RawScheduledStop,
    RawStationSchedule,
    RawTrain,
    RawTrainSchedule,
)
from bart_client.adapters.bart_api.xml_document import (
    attributes,
    build_raw,
    child_texts,
    find_text,
    parse_datetime,
    parse_flag,
)
from bart_client.domain.errors import DecodeError
from bart_client.domain.models.schedule import (
    RouteSchedule,
    Schedule,
    ScheduledStop,
    TrainSchedule,
)
from bart_client.domain.models.station import Station
from bart_client.domain.models.train import StationSchedule, Train


class ScheduleParser:
    """Parses schedule documents into Schedule, RouteSchedule and StationSchedule objects."""

    @staticmethod
    def parse_schedules(root: etree._Element, operation: str) -> list[Schedule]:
        """Parse every <schedule> under <schedules>."""
        schedules = []
        for element in root.iterfind("schedules/schedule"):
            raw = build_raw(RawSchedule, attributes(element), operation)
            effective_date = parse_datetime(
                raw.effective_date, EFFECTIVE_DATE_FORMAT, "effectivedate", operation
            )
            schedules.append(Schedule(number=raw.number, effective_date=effective_date))
        return schedules

    @staticmethod
    def parse_route_schedule(root: etree._Element, operation: str) -> RouteSchedule:
        """Parse a routesched document.

        Stops without an origTime are stations the train passes without
        stopping; their time is None.
        """
        fields: dict[str, object] = dict(child_texts(root))
        fields["message"] = find_text(root, "message/special_schedule")
        raw = build_raw(RawRouteSchedule, fields, operation)

        trains = tuple(
            ScheduleParser._parse_train_schedule(element, operation)
            for element in root.iterfind("route/train")
        )
        return RouteSchedule(number=raw.number, trains=trains, message=raw.message)

    @staticmethod
    def parse_station_schedule(root: etree._Element, operation: str) -> StationSchedule:
        """Parse a stnsched document into the trains leaving one station."""
        station_element = root.find("station")
        if station_element is None:
            raise DecodeError(operation, "missing <station> element")

        fields = child_texts(root) | child_texts(station_element)
        raw = build_raw(RawStationSchedule, fields, operation)
        origin = Station(abbreviation=raw.abbreviation, name=raw.name)

        trains = tuple(
            ScheduleParser._parse_train(element, origin, operation)
            for element in station_element.iterfind("item")
        )
        return StationSchedule(station=origin, date=raw.date, number=raw.number, trains=trains)

    @staticmethod
    def _parse_train_schedule(element: etree._Element, operation: str) -> TrainSchedule:
        raw = build_raw(RawTrainSchedule, attributes(element), operation)
        stops = []
        for stop_element in element.iterfind("stop"):
            raw_stop = build_raw(RawScheduledStop, attributes(stop_element), operation)
            scheduled_time = (
                ScheduleParser._parse_clock(raw_stop.time, "origTime", operation)
                if raw_stop.time
                else None
            )
            stops.append(
                ScheduledStop(
                    station=Station(abbreviation=raw_stop.station),
                    scheduled_time=scheduled_time,
                    bike_allowed=parse_flag(raw_stop.bike_flag),
                )
            )
        return TrainSchedule(index=raw.index, stops=tuple(stops))

    @staticmethod
    def _parse_train(element: etree._Element, origin: Station, operation: str) -> Train:
        raw = build_raw(RawTrain, attributes(element), operation)
        return Train(
            line=raw.line,
            origin=origin,
            head_station=Station(abbreviation=raw.head_station),
            origin_time=ScheduleParser._parse_clock(raw.origin_time, "origTime", operation),
            destination_time=ScheduleParser._parse_clock(
                raw.destination_time, "destTime", operation
            ),
            index=raw.index,
            bike_allowed=parse_flag(raw.bike_flag),
        )

    @staticmethod
    def _parse_clock(raw: str, field: str, operation: str) -> time:
        return parse_datetime(raw, CLOCK_TIME_FORMAT, field, operation).time()
