"""Tests for estimated departure decoding."""

import pytest

from bart_client.adapters.bart_api.departure_parser import DepartureParser
from bart_client.adapters.bart_api.xml_document import parse_document
from bart_client.domain.errors import DecodeError
from bart_client.domain.models import Departure, Estimate, Station

ETD_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<root>
  <uri><![CDATA[http://api.bart.gov/api/etd.aspx?cmd=etd&orig=RICH]]></uri>
  <date>01/12/2017</date>
  <time>11:05:17 AM PST</time>
  <station>
    <name>Richmond</name>
    <abbr>RICH</abbr>
    <etd>
      <destination>Fremont</destination>
      <abbreviation>FRMT</abbreviation>
      <limited>0</limited>
      <estimate>
        <minutes>Leaving</minutes>
        <platform>2</platform>
        <direction>South</direction>
        <length>6</length>
        <color>ORANGE</color>
        <hexcolor>#ff9933</hexcolor>
        <bikeflag>1</bikeflag>
        <delay>0</delay>
      </estimate>
      <estimate>
        <minutes>5</minutes>
        <platform>2</platform>
        <direction>South</direction>
        <length>6</length>
        <color>ORANGE</color>
        <hexcolor>#ff9933</hexcolor>
        <bikeflag>1</bikeflag>
        <delay>0</delay>
      </estimate>
    </etd>
    <etd>
      <destination>Millbrae</destination>
      <abbreviation>MLBR</abbreviation>
      <limited>1</limited>
      <estimate>
        <minutes>12</minutes>
        <platform>1</platform>
        <direction>South</direction>
        <length>10</length>
        <color>RED</color>
        <hexcolor>#ff0000</hexcolor>
        <bikeflag>0</bikeflag>
      </estimate>
    </etd>
  </station>
  <message/>
</root>
"""


def _parse(xml: bytes) -> list[Departure]:
    return DepartureParser.parse_departures(parse_document(xml, "etd"), "etd")


def _estimate_xml(minutes: str) -> bytes:
    return f"""<root><station><etd>
  <destination>Fremont</destination><abbreviation>FRMT</abbreviation><limited>0</limited>
  <estimate><minutes>{minutes}</minutes><platform>2</platform><length>6</length></estimate>
</etd></station></root>""".encode()


def test_departures_are_decoded_in_document_order() -> None:
    """Given two etd blocks, when decoding, then two departures keep their order."""
    departures = _parse(ETD_XML)

    assert [d.destination.abbreviation for d in departures] == ["FRMT", "MLBR"]
    assert len(departures[0].estimates) == 2
    assert len(departures[1].estimates) == 1


def test_destination_is_a_stub_station() -> None:
    """Given an etd block, when decoding, then the destination only has name and abbreviation."""
    departure = _parse(ETD_XML)[0]

    assert departure.destination == Station(abbreviation="FRMT", name="Fremont")


def test_limited_flag_is_true_only_for_one() -> None:
    """Given limited 0 and 1, when decoding, then only 1 yields True."""
    departures = _parse(ETD_XML)

    assert departures[0].limited is False
    assert departures[1].limited is True


@pytest.mark.parametrize(
    ("limited", "expected"),
    [("1", True), ("0", False), ("2", False), ("-1", False), ("", False), ("yes", False)],
)
def test_limited_flag_values(limited: str, expected: bool) -> None:
    """Given various limited values, when decoding, then True iff the integer is 1."""
    xml = f"<root><station><etd><limited>{limited}</limited></etd></station></root>".encode()

    assert _parse(xml)[0].limited is expected


def test_estimate_fields_are_decoded() -> None:
    """Given a full estimate, when decoding, then every field is populated."""
    estimate = _parse(ETD_XML)[1].estimates[0]

    assert estimate == Estimate(
        minutes=12,
        platform=1,
        direction="South",
        length=10,
        color="RED",
        hex_color="#ff0000",
        bike_flag="0",
    )


def test_numeric_minutes_are_parsed() -> None:
    """Given minutes '5', when decoding, then minutes is 5."""
    assert _parse(_estimate_xml("5"))[0].estimates[0].minutes == 5


@pytest.mark.parametrize("placeholder", ["Leaving", "Arriving", ""])
def test_placeholder_minutes_become_zero(placeholder: str) -> None:
    """Given non-numeric minutes, when decoding, then minutes is 0 and nothing fails."""
    assert _parse(_estimate_xml(placeholder))[0].estimates[0].minutes == 0


def test_when_platform_is_not_numeric_then_raises_decode_error() -> None:
    """Given a non-numeric platform, when decoding, then DecodeError names the operation."""
    xml = _estimate_xml("5").replace(b"<platform>2</platform>", b"<platform>two</platform>")

    with pytest.raises(DecodeError) as exc_info:
        _parse(xml)

    assert exc_info.value.operation == "etd"


def test_when_station_has_no_departures_then_returns_empty_list() -> None:
    """Given a station without etd blocks, when decoding, then the result is empty."""
    xml = b"<root><station><name>Richmond</name><abbr>RICH</abbr></station></root>"

    assert _parse(xml) == []


def test_departures_of_all_stations_are_collected() -> None:
    """Given an orig=ALL response with two stations, when decoding, then all etds are returned."""
    xml = b"""<root>
  <station><abbr>RICH</abbr><etd><abbreviation>FRMT</abbreviation></etd></station>
  <station><abbr>EMBR</abbr><etd><abbreviation>DALY</abbreviation></etd></station>
</root>"""

    assert [d.destination.abbreviation for d in _parse(xml)] == ["FRMT", "DALY"]
