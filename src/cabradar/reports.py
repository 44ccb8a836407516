"""Driver update reports for inspector checks.

Reports are session-local: applying one returns a patched copy of the
inspector and nothing is sent upstream.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from enum import Enum

from cabradar.models import Inspector, InspectorReportType

logger = logging.getLogger(__name__)


class UpdateReport(str, Enum):
    """Update a driver can submit from an inspector detail page."""

    STILL_HERE = "still-here"
    CLEAR = "clear"
    TFL = "tfl"
    POLICE_CHECK = "police-check"


def apply_report(
    inspector: Inspector,
    report: UpdateReport | str,
    now: datetime | None = None,
) -> Inspector:
    """Return a copy of ``inspector`` patched with a driver report.

    "still-here" keeps the current check type and only refreshes the
    timestamp; the other reports replace the type.

    Args:
        inspector: Inspector as resolved from the feed (left untouched).
        report: Submitted report.
        now: Report time, defaults to the current UTC time.

    Returns:
        New Inspector with updated ``report_type`` and ``time``.

    Raises:
        ValueError: If ``report`` is not a known report type.
    """
    report = UpdateReport(report)
    if report is UpdateReport.STILL_HERE:
        report_type = inspector.report_type
    else:
        report_type = InspectorReportType(report.value)

    reported_at = (now or datetime.now(timezone.utc)).isoformat()
    logger.debug(f"Applying {report.value} report to inspector {inspector.id}")
    return replace(inspector, report_type=report_type, time=reported_at)
