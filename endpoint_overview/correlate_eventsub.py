"""Match EventSub subscription types against the crate's eventsub modules."""

import logging
from collections.abc import Iterable

from endpoint_overview.api_surface import ApiSurface
from endpoint_overview.coverage import EventSubCoverage, group_by
from endpoint_overview.naming import subscription_struct_name
from endpoint_overview.reference_row import EventSubRow

logger = logging.getLogger(__name__)


def correlate_eventsub_row(row: EventSubRow, surface: ApiSurface) -> EventSubCoverage:
    """Correlate a single subscription type.

    Both the subscription and its payload type have to exist for the row to
    count as implemented.
    """
    category = row.category
    sub_name = subscription_struct_name(row.name, row.version)
    payload_name = sub_name + "Payload"
    names = surface.eventsub_types.get(category, set())

    if sub_name not in names or payload_name not in names:
        logger.warning(
            "[EventSub] missing %s (%s/%s)", row.name, sub_name, payload_name
        )
        return EventSubCoverage(row=row, subscription_name=sub_name)

    return EventSubCoverage(
        row=row,
        subscription_name=sub_name,
        subscription=f"{category}::{sub_name}",
        payload=f"{category}::{payload_name}",
    )


def correlate_eventsub(
    rows: Iterable[EventSubRow], surface: ApiSurface
) -> list[EventSubCoverage]:
    """Correlate every row; within a category results are sorted by type name."""
    results: list[EventSubCoverage] = []
    for category_rows in group_by(rows, lambda r: r.category).values():
        resolved = [correlate_eventsub_row(row, surface) for row in category_rows]
        resolved.sort(key=lambda c: c.row.name)
        results.extend(resolved)
    return results
