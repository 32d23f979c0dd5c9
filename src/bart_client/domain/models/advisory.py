"""Service advisory domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AdvisoryType(str, Enum):
    """Kinds of advisories BART posts."""

    DELAY = "DELAY"
    ELEVATOR = "ELEVATOR"
    EMERGENCY = "EMERGENCY"


@dataclass(frozen=True)
class ServiceAdvisory:
    """A posted service disruption or status message.

    Records that BART returns without a posted time carry only their text,
    with type, posted and expires left as None.
    """

    id: int = 0
    type: AdvisoryType | None = None
    description: str = ""
    sms_text: str = ""
    posted: datetime | None = None
    expires: datetime | None = None
    station: str = ""
