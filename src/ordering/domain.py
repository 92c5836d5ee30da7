"""Ordering bounded context — customer orders and their line items.

Handles order intake, retrieval of an order's line items, and in-place
revision of an existing order. Orders and line items are persisted as two
independent aggregates kept consistent by the order service.
"""

from protean.domain import Domain

from ordering.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

ordering = Domain(name="ordering")
