"""Visitors package - log each visit, then redirect.

The HTTP routes live in ``packages.visitors.routes`` and are mounted by
``api.router``.
"""

from packages.visitors.client_ip import client_ip_from_request, resolve_client_ip
from packages.visitors.geolocation import VisitorInfo, lookup_visitor
from packages.visitors.log_store import VisitLog
from packages.visitors.records import VisitRecord, format_timestamp
from packages.visitors.service import record_visit

__all__ = [
    "client_ip_from_request",
    "resolve_client_ip",
    "lookup_visitor",
    "VisitorInfo",
    "VisitLog",
    "VisitRecord",
    "format_timestamp",
    "record_visit",
]
