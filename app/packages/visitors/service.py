"""
Visitor tracking pipeline.

Resolve geolocation, format the visit line, append it to the log and mirror
it to the console. Every step is best-effort: nothing here raises into the
redirect handler.
"""

import structlog

from infrastructure.clients.ip_api import IpApiClient
from infrastructure.configuration import VisitorConfig
from infrastructure.logging.setup import CONSOLE_MIRROR_LOGGER
from packages.visitors.geolocation import lookup_visitor
from packages.visitors.log_store import VisitLog
from packages.visitors.records import VisitRecord

logger = structlog.get_logger()
mirror_logger = structlog.get_logger(CONSOLE_MIRROR_LOGGER)


async def record_visit(
    client_ip: str, config: VisitorConfig, ip_api: IpApiClient
) -> VisitRecord:
    """Record a visit from ``client_ip``.

    Args:
        client_ip: IP resolved from the request
        config: Visitor tracking configuration
        ip_api: Geolocation client

    Returns:
        The VisitRecord that was logged (or that the log failed to store)
    """
    visitor = await lookup_visitor(client_ip, ip_api)
    record = VisitRecord.create(
        ip=visitor.ip, organization=visitor.org, country=visitor.country
    )
    line = record.to_log_line(config.timezone)

    result = await VisitLog(config.log_path).append(line)
    if not result.is_success:
        logger.warning(
            "visit_log_append_failed",
            error_code=result.error_code,
            error=result.message,
        )

    # Console copy is emitted whether or not the file append worked, and
    # regardless of LOG_LEVEL
    mirror_logger.info("visit_recorded", line=line)
    return record
