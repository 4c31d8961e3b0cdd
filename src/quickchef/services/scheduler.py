"""Deterministic refinement of model-generated schedules."""

import re
from collections.abc import Sequence

from quickchef.domain.plans import ScheduleItem

DEFAULT_COOK_START_HOUR = 18
LATE_NIGHT_HOUR = 20

_TYPE_ORDER = {"shop": 0, "prep": 1, "cook": 2}
_HOUR_PATTERN = re.compile(r"(\d{1,2}):\d{2}")


def cook_time_block(day: int, start_hour: int = DEFAULT_COOK_START_HOUR) -> str:
    """Return the canonical time block for a cook task."""
    return f"Day {day} @ {start_hour:02d}:00"


def refine_schedule(
    schedule: Sequence[ScheduleItem], start_hour: int = DEFAULT_COOK_START_HOUR
) -> tuple[ScheduleItem, ...]:
    """Pin cook tasks to the start hour and sort tasks chronologically.

    Tasks are ordered by day, then shop before prep before cook. Unknown
    task types rank with shop. The input sequence and its items are not mutated.
    """
    refined = [
        item.model_copy(update={"time_block": cook_time_block(item.day, start_hour)})
        if item.type == "cook"
        else item
        for item in schedule
    ]
    return tuple(
        sorted(refined, key=lambda item: (item.day, _TYPE_ORDER.get(item.type, 0)))
    )


def reschedule_task(
    schedule: Sequence[ScheduleItem], task_id: str, day: int, time_block: str
) -> tuple[ScheduleItem, ...]:
    """Move a task to a new day and time block, keeping the schedule ordered.

    Raises KeyError for an unknown task id.
    """
    if not any(item.id == task_id for item in schedule):
        raise KeyError(task_id)
    updated = [
        item.model_copy(update={"day": day, "time_block": time_block})
        if item.id == task_id
        else item
        for item in schedule
    ]
    return tuple(sorted(updated, key=lambda item: (item.day, item.time_block)))


def is_late_night(time_block: str) -> bool:
    """Whether a time block starts at or after the late-night hour."""
    match = _HOUR_PATTERN.search(time_block)
    if match is None:
        return False
    return int(match.group(1)) >= LATE_NIGHT_HOUR
