"""Request and response bodies for the planner HTTP API."""

from datetime import date

from pydantic import BaseModel, Field

from quickchef.domain.plans import MealPlan, MealSlot, SwapRequest
from quickchef.domain.requests import CookingRequest
from quickchef.services.prompts import REPLACE_CRITERIA_DEFAULT


class MealTarget(BaseModel):
    """Positional reference to a meal inside a plan."""

    request: CookingRequest
    plan: MealPlan
    day_index: int = Field(ge=0)
    slot: MealSlot


class ReplaceMealBody(MealTarget):
    """Replace one meal with a different one."""

    criteria: str = REPLACE_CRITERIA_DEFAULT


class SwapIngredientsBody(MealTarget):
    """Swap ingredients inside one meal."""

    swaps: list[SwapRequest]


class RescheduleBody(BaseModel):
    """Move a schedule task to another day and time."""

    plan: MealPlan
    task_id: str
    day: int = Field(ge=1)
    time_block: str


class RescheduleResult(BaseModel):
    """Rescheduled plan with a late-night cooking hint."""

    plan: MealPlan
    late_night: bool


class CalendarBody(BaseModel):
    """Plan to export, with an optional day-zero date."""

    plan: MealPlan
    start: date | None = None
