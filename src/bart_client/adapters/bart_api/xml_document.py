"""Helpers for reading BART XML documents.

Decoding happens in two phases: elements are first collected into loosely
typed raw models (see raw.py), then each parser normalizes the raw values
into domain objects. These helpers cover the first phase and the shared
normalization rules.
"""

from datetime import datetime
from typing import TypeVar

from lxml import etree
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bart_client.adapters.bart_api.constants import ADVISORY_TIMEZONES
from bart_client.domain.errors import DecodeError, ParseError

RawT = TypeVar("RawT", bound=BaseModel)

ROOT_TAG = "root"


def parse_document(body: bytes, operation: str) -> etree._Element:
    """Parse a response body and check it is a BART <root> document."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(body, parser=parser)
    except etree.XMLSyntaxError as e:
        raise DecodeError(operation, e) from e

    if root.tag != ROOT_TAG:
        raise DecodeError(operation, f"expected element type <{ROOT_TAG}> but have <{root.tag}>")
    return root


def child_texts(element: etree._Element) -> dict[str, str]:
    """Map child element tags to their stripped text, skipping empty children.

    The first occurrence of a tag wins. Empty text counts as absent so the raw
    model defaults apply.
    """
    fields: dict[str, str] = {}
    for child in element:
        if not isinstance(child.tag, str):
            continue  # comments and processing instructions
        text = (child.text or "").strip()
        if text and child.tag not in fields:
            fields[child.tag] = text
    return fields


def attributes(element: etree._Element) -> dict[str, str]:
    """Map attribute names to their stripped values, skipping empty ones."""
    return {name: value.strip() for name, value in element.attrib.items() if value.strip()}


def find_text(element: etree._Element, path: str) -> str | None:
    """Return the stripped text at path, or None when missing or empty."""
    text = element.findtext(path)
    if text is None:
        return None
    return text.strip() or None


def build_raw(model: type[RawT], fields: dict[str, object], operation: str) -> RawT:
    """Validate collected fields into a raw model, as a DecodeError on mismatch."""
    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        raise DecodeError(operation, e) from e


def parse_tolerant_int(text: str) -> int:
    """Parse an integer, substituting 0 for placeholder text such as "Leaving"."""
    try:
        return int(text)
    except ValueError:
        return 0


def parse_flag(text: str) -> bool:
    """Interpret a 0/1 flag: True only when the value is the integer 1."""
    return parse_tolerant_int(text) == 1


def parse_datetime(raw: str, fmt: str, field: str, operation: str) -> datetime:
    """Parse raw text with a fixed layout."""
    try:
        return datetime.strptime(raw, fmt)
    except ValueError as e:
        raise ParseError(field, raw, operation, e) from e


def parse_zoned_datetime(raw: str, fmt: str, field: str, operation: str) -> datetime:
    """Parse a timestamp followed by a zone abbreviation, e.g. "... 10:52 AM PST".

    The abbreviation selects a fixed UTC offset, so PST and PDT keep their own
    offsets even inside the fall-back hour.
    """
    if not raw:
        raise ParseError(field, raw, operation, "missing value")
    stamp, _, zone_name = raw.rpartition(" ")
    zone = ADVISORY_TIMEZONES.get(zone_name)
    if not stamp or zone is None:
        raise ParseError(field, raw, operation, f"unknown time zone {zone_name!r}")
    return parse_datetime(stamp, fmt, field, operation).replace(tzinfo=zone)
