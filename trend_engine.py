import logging
import math
import re
from datetime import date

from adherence_tracker import adherence_rate

logger = logging.getLogger(__name__)

INVALID_WEEK_KEY = "NaN-WNaN"
_WEEK_KEY_PATTERN = re.compile(r"^(\d+)-W(\d+)$")


def _parse_day(value):
    return date.fromisoformat(str(value)[:10])


def week_number(day):
    """
    Simple week-of-year, not ISO 8601:
    ceil((days since Jan 1 + weekday of Jan 1 (Sunday = 0) + 1) / 7)

    Week 1 is whatever part of the first week falls in January.
    """
    jan1 = date(day.year, 1, 1)
    jan1_offset = jan1.isoweekday() % 7
    return math.ceil(((day - jan1).days + jan1_offset + 1) / 7)


def week_key(value):
    try:
        day = _parse_day(value)
    except (TypeError, ValueError):
        logger.debug("Unparseable log date %r", value)
        return INVALID_WEEK_KEY
    return f"{day.year}-W{week_number(day)}"


def _lexical_order(key):
    return key


def _chronological_order(key):
    match = _WEEK_KEY_PATTERN.match(key)
    if not match:
        return (-1, -1)
    return (int(match.group(1)), int(match.group(2)))


# Lexical is the historical report order: string comparison of keys, so
# "2025-W9" sorts after "2025-W10". Chronological compares (year, week).
WEEK_ORDERINGS = {
    "lexical": _lexical_order,
    "chronological": _chronological_order,
}


def calculate_weekly_trends(logs, weeks=4, ordering="lexical"):
    """
    Adherence for the most recent `weeks` week keys that have logs,
    oldest first: [{week, adherenceRate}]

    Every log counts towards the week's total, only taken logs towards taken.
    """
    if ordering not in WEEK_ORDERINGS:
        raise ValueError(f"Unknown week ordering: {ordering!r}")

    buckets = {}
    for log in logs:
        key = week_key(log.get("date"))
        bucket = buckets.setdefault(key, {"taken": 0, "total": 0})
        if log.get("status") == "taken":
            bucket["taken"] += 1
        bucket["total"] += 1

    recent = sorted(buckets, key=WEEK_ORDERINGS[ordering], reverse=True)[:weeks]
    recent.reverse()

    return [
        {
            "week": key,
            "adherenceRate": adherence_rate(buckets[key]["taken"], buckets[key]["total"]),
        }
        for key in recent
    ]


def annotate_trend_directions(trend_rows):
    """Copy rows adding `trend`: None first, then improving or declining."""
    annotated = []
    previous = None
    for row in trend_rows:
        trend = None
        if previous is not None:
            trend = "improving" if row["adherenceRate"] > previous["adherenceRate"] else "declining"
        annotated.append({**row, "trend": trend})
        previous = row
    return annotated
