"""Visit records and their log line format.

The log line shape is read back verbatim by ``GET /logs`` and by anything
tailing the file, so it must not change:

    [YYYY-MM-DD HH:MM:SS] IP: <ip> | Organization: <org> | Country: <country>
"""

from datetime import datetime, timezone, tzinfo
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from infrastructure.clients.ip_api import UNKNOWN
from infrastructure.configuration.visitors import VISIT_LOG_TIMEZONE

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime, tz: tzinfo = VISIT_LOG_TIMEZONE) -> str:
    """Render ``moment`` as ``[YYYY-MM-DD HH:MM:SS]`` in ``tz``.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return f"[{moment.astimezone(tz).strftime(TIMESTAMP_FORMAT)}]"


class VisitRecord(BaseModel):
    """A single visit, immutable once created."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(..., description="When the visit was handled")
    ip: str = Field(..., description="Visitor IP as echoed by the geolocation lookup")
    organization: str = Field(UNKNOWN, description="Network owner of the IP")
    country: str = Field(UNKNOWN, description="Country of the IP")

    @classmethod
    def create(
        cls,
        ip: str,
        organization: str = UNKNOWN,
        country: str = UNKNOWN,
        now: Optional[datetime] = None,
    ) -> "VisitRecord":
        """Create a record stamped with ``now`` (defaults to the current time)."""
        return cls(
            timestamp=now or datetime.now(timezone.utc),
            ip=ip,
            organization=organization,
            country=country,
        )

    def to_log_line(self, tz: tzinfo = VISIT_LOG_TIMEZONE) -> str:
        """Format the record as a log line, without trailing newline."""
        return (
            f"{format_timestamp(self.timestamp, tz)} IP: {self.ip} | "
            f"Organization: {self.organization} | Country: {self.country}"
        )
