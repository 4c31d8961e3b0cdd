"""Tests for iCalendar export."""

from datetime import date

from quickchef.domain.plans import MealPlan
from quickchef.services.calendar import export_ics
from quickchef.services.scheduler import refine_schedule
from tests.conftest import plan_payload


def _refined_plan() -> MealPlan:
    plan = MealPlan.model_validate(plan_payload())
    return plan.model_copy(update={"schedule": refine_schedule(plan.schedule)})


def test_export_ics_wraps_events_in_calendar() -> None:
    ics = export_ics(_refined_plan(), start=date(2025, 3, 1))
    lines = ics.split("\r\n")

    assert lines[0] == "BEGIN:VCALENDAR"
    assert "PRODID:-//QuickChef//Pro//EN" in lines
    assert lines[-2] == "END:VCALENDAR"
    assert lines.count("BEGIN:VEVENT") == 3


def test_export_ics_uses_time_block_hour_and_duration() -> None:
    ics = export_ics(_refined_plan(), start=date(2025, 3, 1))

    assert "SUMMARY:QuickChef: COOK - Cook dinner" in ics
    assert "DTSTART:20250302T180000" in ics
    assert "DTEND:20250302T184000" in ics
    assert "DTSTART:20250302T100000" in ics


def test_export_ics_defaults_to_morning_without_hour() -> None:
    plan = MealPlan.model_validate(plan_payload())

    ics = export_ics(plan, start=date(2025, 3, 1))

    assert "DTSTART:20250302T090000" in ics
    assert "DTEND:20250302T094000" in ics


def test_export_ics_writes_floating_local_times() -> None:
    ics = export_ics(_refined_plan(), start=date(2025, 3, 1))
    stamps = [
        line for line in ics.split("\r\n") if line.startswith(("DTSTART", "DTEND"))
    ]

    assert stamps
    assert all(not line.endswith("Z") for line in stamps)
    assert all("TZID" not in line for line in stamps)
