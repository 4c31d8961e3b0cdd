"""Cooking request models supplied by the UI."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DietType(StrEnum):
    """Dietary preference for the whole plan."""

    VEG = "veg"
    ANY = "any"
    NON_VEG = "non_veg"
    VEGAN = "vegan"


class KitchenSetup(StrEnum):
    """Kitchen capability tier."""

    BASIC = "basic"
    MEDIUM = "medium"
    FULL = "full"


class DayType(StrEnum):
    """Energy level of the cooking day."""

    LOW_ENERGY = "low_energy"
    NORMAL = "normal"
    HIGH_ENERGY = "high_energy"
    BUSY_WORKDAY = "busy_workday"
    RELAXED_DAY = "relaxed_day"


Persona = Literal["student", "professional", "family"]
CookingGoal = Literal["save_time", "save_money", "eat_healthy", "build_muscle"]
BudgetLevel = Literal["low", "medium", "flexible"]
EffortLevel = Literal["minimal", "balanced", "ambitious"]
ProteinLevel = Literal["normal", "high"]


class IngredientInput(BaseModel):
    """Pantry ingredient; locked items must appear in the plan."""

    name: str
    locked: bool = False

    model_config = ConfigDict(frozen=True)


class CookingRequest(BaseModel):
    """Immutable description of a single planning request."""

    persona: Persona = "professional"
    goals: tuple[CookingGoal, ...] = ()
    diet: DietType = DietType.ANY
    dislikes: tuple[str, ...] = ()
    ingredients: tuple[IngredientInput, ...] = ()
    time_available: int = Field(default=30, ge=0)
    kitchen_setup: KitchenSetup = KitchenSetup.BASIC
    day_type: DayType = DayType.NORMAL
    days: int = Field(default=1, ge=1, le=3)
    budget_level: BudgetLevel = "medium"
    effort_level: EffortLevel = "balanced"
    protein_level: ProteinLevel = "normal"

    model_config = ConfigDict(frozen=True)

    @property
    def locked_ingredients(self) -> list[str]:
        """Names of ingredients the plan must use."""
        return [item.name for item in self.ingredients if item.locked]

    @property
    def available_ingredients(self) -> list[str]:
        """Names of ingredients the plan may use."""
        return [item.name for item in self.ingredients if not item.locked]
