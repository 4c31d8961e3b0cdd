"""iCalendar export for plan schedules."""

import re
from datetime import date, datetime, timedelta

from quickchef.domain.plans import MealPlan

DEFAULT_EVENT_HOUR = 9
PRODUCT_ID = "-//QuickChef//Pro//EN"

_HOUR_PATTERN = re.compile(r"(\d{1,2}):")


def export_ics(plan: MealPlan, start: date | None = None) -> str:
    """Render the plan schedule as an iCalendar document.

    Day ``n`` of the plan falls ``n`` days after ``start`` (today by default).
    Event hours come from the time block, falling back to 09:00. Times are
    written as floating local time (no ``Z`` suffix or ``TZID``), so a
    "Day 1 @ 18:00" task lands at 18:00 in whatever zone the calendar uses.
    """
    base = start or date.today()
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", f"PRODID:{PRODUCT_ID}"]
    for item in plan.schedule:
        event_start = datetime(
            base.year,
            base.month,
            base.day,
            _event_hour(item.time_block),
        ) + timedelta(days=item.day)
        event_end = event_start + timedelta(minutes=item.duration_minutes)
        lines.extend(
            [
                "BEGIN:VEVENT",
                f"UID:{item.id}@quickchef",
                f"SUMMARY:QuickChef: {item.type.upper()} - {_escape(item.description)}",
                f"DTSTART:{_format_timestamp(event_start)}",
                f"DTEND:{_format_timestamp(event_end)}",
                f"DESCRIPTION:{_escape(item.description)}",
                "END:VEVENT",
            ]
        )
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


def _event_hour(time_block: str) -> int:
    match = _HOUR_PATTERN.search(time_block)
    if match is None:
        return DEFAULT_EVENT_HOUR
    hour = int(match.group(1))
    if hour > 23:
        return DEFAULT_EVENT_HOUR
    return hour


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y%m%dT%H%M%S")


def _escape(text: str) -> str:
    """Escape text values per RFC 5545."""
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )
