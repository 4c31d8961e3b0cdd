"""Structured meal plan models returned by the generation service."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

GroceryCategory = Literal["produce", "protein", "pantry", "dairy", "grains", "other"]
TaskType = Literal["shop", "prep", "cook"]
BudgetVerdict = Literal["feasible", "tight", "stretch"]


class _FrozenModel(BaseModel):
    """Base for immutable plan values."""

    model_config = ConfigDict(frozen=True)


class MealSlot(StrEnum):
    """Meal-of-day position inside a day plan."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class Nutrition(_FrozenModel):
    """Approximate nutrition ranges."""

    calories_range: str
    protein_range: str


class PrepChecklist(_FrozenModel):
    """Preparation work grouped by kind."""

    washing: tuple[str, ...]
    chopping: tuple[str, ...]
    marinating: tuple[str, ...]


class Meal(_FrozenModel):
    """Single recipe inside a plan."""

    id: str
    name: str
    description: str
    cooking_method: str
    equipment_alternatives: tuple[str, ...] | None = None
    prep_time_minutes: float = Field(ge=0)
    cooking_time_minutes: float = Field(ge=0)
    todo_list: tuple[str, ...]
    step_by_step_recipe: tuple[str, ...]
    prep_checklist: PrepChecklist
    cooking_sequence: tuple[str, ...]
    used_ingredients: tuple[str, ...]
    nutrition: Nutrition
    leftover_strategy: str | None = None
    swap_options: tuple[str, ...] | None = None


class DayMeals(_FrozenModel):
    """Breakfast, lunch and dinner for one day."""

    breakfast: Meal
    lunch: Meal
    dinner: Meal

    def get(self, slot: MealSlot) -> Meal:
        """Return the meal at a slot."""
        match slot:
            case MealSlot.BREAKFAST:
                return self.breakfast
            case MealSlot.LUNCH:
                return self.lunch
            case MealSlot.DINNER:
                return self.dinner

    def replace(self, slot: MealSlot, meal: Meal) -> "DayMeals":
        """Return a copy with the meal at a slot replaced."""
        match slot:
            case MealSlot.BREAKFAST:
                return self.model_copy(update={"breakfast": meal})
            case MealSlot.LUNCH:
                return self.model_copy(update={"lunch": meal})
            case MealSlot.DINNER:
                return self.model_copy(update={"dinner": meal})


class DayPlan(_FrozenModel):
    """Meals planned for a single day."""

    day: int
    meals: DayMeals


class GroceryItem(_FrozenModel):
    """Grocery list entry."""

    ingredient: str
    needed: bool
    used_in_meals: int = Field(ge=0)
    category: GroceryCategory


class ScheduleItem(_FrozenModel):
    """Shop, prep or cook task on the plan calendar."""

    id: str
    type: TaskType
    day: int
    time_block: str
    description: str
    duration_minutes: int = Field(ge=0)


class Substitution(_FrozenModel):
    """Suggested ingredient substitution."""

    original: str
    substitute: str
    reason: str


class BudgetSummary(_FrozenModel):
    """Budget feasibility verdict."""

    level: str
    verdict: BudgetVerdict
    strategy: tuple[str, ...]


class DayNutrition(_FrozenModel):
    """Nutrition ranges for one day."""

    day: int
    calories_range: str
    protein_range: str


class NutritionSummary(_FrozenModel):
    """Per-day nutrition ranges."""

    per_day: tuple[DayNutrition, ...]


class MealPlan(_FrozenModel):
    """Multi-day cooking plan."""

    days: tuple[DayPlan, ...]
    grocery_list: tuple[GroceryItem, ...]
    schedule: tuple[ScheduleItem, ...]
    substitutions: tuple[Substitution, ...]
    budget_summary: BudgetSummary
    nutrition_summary: NutritionSummary

    def with_meal(self, day_index: int, slot: MealSlot, meal: Meal) -> "MealPlan":
        """Return a copy of the plan with one meal spliced in by position.

        Raises IndexError when ``day_index`` is outside the plan.
        """
        if not 0 <= day_index < len(self.days):
            raise IndexError(f"Day index {day_index} is outside the plan")
        day = self.days[day_index]
        days = list(self.days)
        days[day_index] = day.model_copy(update={"meals": day.meals.replace(slot, meal)})
        return self.model_copy(update={"days": tuple(days)})


class SwapRequest(_FrozenModel):
    """Ingredient to swap, with an optional explicit replacement."""

    ingredient: str
    replacement: str | None = None

    @property
    def has_replacement(self) -> bool:
        """Whether the caller named a concrete substitute."""
        return bool(self.replacement and self.replacement.strip())
