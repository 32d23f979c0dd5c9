"""Parser for the bsa, elev and count command responses."""

import logging

from lxml import etree

from bart_client.adapters.bart_api.constants import ADVISORY_SENTINELS, ADVISORY_TIME_FORMAT
from bart_client.adapters.bart_api.raw import RawAdvisory, RawTrainCount
from bart_client.adapters.bart_api.xml_document import (
    attributes,
    build_raw,
    child_texts,
    parse_zoned_datetime,
)
from bart_client.domain.errors import ValidationError
from bart_client.domain.models.advisory import AdvisoryType, ServiceAdvisory

logger = logging.getLogger(__name__)

VALID_ADVISORY_TYPES = tuple(advisory_type.value for advisory_type in AdvisoryType)


class AdvisoryParser:
    """Parses advisory listings into ServiceAdvisory objects.

    When there is nothing to report BART does not send an empty list. It sends
    a single <bsa> without <posted> whose description is a fixed message. A
    listing made of one such sentinel record decodes to an empty list, and any
    record without <posted> short-circuits to a text-only advisory.
    """

    @staticmethod
    def parse_advisories(root: etree._Element, operation: str) -> list[ServiceAdvisory]:
        """Parse every <bsa> of a bsa or elev response.

        Args:
            root: The <root> element of the response.
            operation: Command name; selects the sentinel description.

        Returns:
            List of ServiceAdvisory objects, empty when BART reports nothing.

        Raises:
            ValidationError: An advisory type outside DELAY, ELEVATOR, EMERGENCY.
            ParseError: A posted or expires timestamp in an unexpected layout.
        """
        elements = root.findall("bsa")

        # Compared on the untouched text, before any other field is read.
        sentinel = ADVISORY_SENTINELS.get(operation)
        if (
            sentinel is not None
            and len(elements) == 1
            and elements[0].findtext("description") == sentinel
        ):
            logger.debug(f"'{operation}' returned the no-data sentinel: {sentinel!r}")
            return []

        return [
            AdvisoryParser._parse_advisory(
                build_raw(RawAdvisory, child_texts(element) | attributes(element), operation),
                operation,
            )
            for element in elements
        ]

    @staticmethod
    def parse_train_count(root: etree._Element, operation: str) -> int:
        """Parse <traincount>."""
        return build_raw(RawTrainCount, child_texts(root), operation).train_count

    @staticmethod
    def _parse_advisory(raw: RawAdvisory, operation: str) -> ServiceAdvisory:
        if not raw.posted:
            return ServiceAdvisory(
                id=raw.id,
                description=raw.description,
                sms_text=raw.sms_text,
                station=raw.station,
            )

        return ServiceAdvisory(
            id=raw.id,
            type=AdvisoryParser._parse_type(raw.type, operation),
            description=raw.description,
            sms_text=raw.sms_text,
            posted=parse_zoned_datetime(raw.posted, ADVISORY_TIME_FORMAT, "posted", operation),
            expires=parse_zoned_datetime(raw.expires, ADVISORY_TIME_FORMAT, "expires", operation),
            station=raw.station,
        )

    @staticmethod
    def _parse_type(value: str, operation: str) -> AdvisoryType:
        if value not in VALID_ADVISORY_TYPES:
            raise ValidationError(value, operation, VALID_ADVISORY_TYPES)
        return AdvisoryType(value)
