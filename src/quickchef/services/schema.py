"""Output schemas for structured generation, described as plain data."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StringField:
    """Free-text string."""

    description: str | None = None


@dataclass(frozen=True)
class NumberField:
    """Floating point number."""

    description: str | None = None
    minimum: float | None = None


@dataclass(frozen=True)
class IntegerField:
    """Whole number."""

    description: str | None = None
    minimum: int | None = None


@dataclass(frozen=True)
class BooleanField:
    """True or false."""

    description: str | None = None


@dataclass(frozen=True)
class EnumField:
    """String restricted to literal values."""

    values: tuple[str, ...]
    description: str | None = None


@dataclass(frozen=True)
class ArrayField:
    """Homogeneous list."""

    items: "SchemaField"
    description: str | None = None


@dataclass(frozen=True)
class ObjectField:
    """Object with named properties; names in ``optional`` may be null."""

    properties: dict[str, "SchemaField"]
    optional: frozenset[str] = field(default_factory=frozenset)
    description: str | None = None


SchemaField = (
    StringField
    | NumberField
    | IntegerField
    | BooleanField
    | EnumField
    | ArrayField
    | ObjectField
)


def to_json_schema(schema: SchemaField) -> dict[str, object]:
    """Render a field description as strict JSON Schema.

    Strict structured output requires every property to be listed as
    required, so optional properties are rendered as nullable instead.
    """
    rendered: dict[str, object]
    match schema:
        case StringField():
            rendered = {"type": "string"}
        case NumberField(minimum=minimum):
            rendered = {"type": "number"}
            if minimum is not None:
                rendered["minimum"] = minimum
        case IntegerField(minimum=minimum):
            rendered = {"type": "integer"}
            if minimum is not None:
                rendered["minimum"] = minimum
        case BooleanField():
            rendered = {"type": "boolean"}
        case EnumField(values=values):
            rendered = {"type": "string", "enum": list(values)}
        case ArrayField(items=items):
            rendered = {"type": "array", "items": to_json_schema(items)}
        case ObjectField(properties=properties, optional=optional):
            props: dict[str, object] = {}
            for name, prop in properties.items():
                prop_schema = to_json_schema(prop)
                if name in optional:
                    prop_schema = {"anyOf": [prop_schema, {"type": "null"}]}
                props[name] = prop_schema
            rendered = {
                "type": "object",
                "properties": props,
                "required": list(properties),
                "additionalProperties": False,
            }
    if schema.description:
        rendered["description"] = schema.description
    return rendered


def _string_list(description: str | None = None) -> ArrayField:
    return ArrayField(items=StringField(), description=description)


GROCERY_CATEGORIES = ("produce", "protein", "pantry", "dairy", "grains", "other")
TASK_TYPES = ("shop", "prep", "cook")
BUDGET_VERDICTS = ("feasible", "tight", "stretch")

MEAL_SCHEMA = ObjectField(
    properties={
        "id": StringField(description="Unique ID for this meal instance"),
        "name": StringField(),
        "description": StringField(),
        "cooking_method": StringField(
            description="e.g. Pan fry, Pressure cooker. NO OVEN for basic setup."
        ),
        "equipment_alternatives": _string_list(
            "Alternative tools if main tool unavailable"
        ),
        "prep_time_minutes": NumberField(minimum=0),
        "cooking_time_minutes": NumberField(minimum=0),
        "todo_list": _string_list(),
        "step_by_step_recipe": _string_list("6-10 clear cooking steps"),
        "prep_checklist": ObjectField(
            properties={
                "washing": _string_list(),
                "chopping": _string_list(),
                "marinating": _string_list(),
            }
        ),
        "cooking_sequence": _string_list(),
        "used_ingredients": _string_list("Ingredients with quantities"),
        "nutrition": ObjectField(
            properties={
                "calories_range": StringField(),
                "protein_range": StringField(),
            }
        ),
        "leftover_strategy": StringField(),
        "swap_options": _string_list(),
    },
    optional=frozenset({"equipment_alternatives", "leftover_strategy", "swap_options"}),
)

GROCERY_ITEM_SCHEMA = ObjectField(
    properties={
        "ingredient": StringField(),
        "needed": BooleanField(
            description="True if not in pantry, False if user already has it"
        ),
        "used_in_meals": IntegerField(minimum=0),
        "category": EnumField(values=GROCERY_CATEGORIES),
    }
)

SCHEDULE_ITEM_SCHEMA = ObjectField(
    properties={
        "id": StringField(),
        "type": EnumField(values=TASK_TYPES),
        "day": IntegerField(minimum=1),
        "time_block": StringField(description="e.g. Day 1 @ 18:00"),
        "description": StringField(),
        "duration_minutes": IntegerField(minimum=0),
    }
)

SUBSTITUTION_SCHEMA = ObjectField(
    properties={
        "original": StringField(),
        "substitute": StringField(),
        "reason": StringField(),
    }
)

BUDGET_SUMMARY_SCHEMA = ObjectField(
    properties={
        "level": StringField(),
        "verdict": EnumField(values=BUDGET_VERDICTS),
        "strategy": _string_list(),
    }
)

NUTRITION_SUMMARY_SCHEMA = ObjectField(
    properties={
        "per_day": ArrayField(
            items=ObjectField(
                properties={
                    "day": IntegerField(minimum=1),
                    "calories_range": StringField(),
                    "protein_range": StringField(),
                }
            )
        )
    }
)

PLAN_SCHEMA = ObjectField(
    properties={
        "days": ArrayField(
            items=ObjectField(
                properties={
                    "day": IntegerField(minimum=1),
                    "meals": ObjectField(
                        properties={
                            "breakfast": MEAL_SCHEMA,
                            "lunch": MEAL_SCHEMA,
                            "dinner": MEAL_SCHEMA,
                        }
                    ),
                }
            )
        ),
        "grocery_list": ArrayField(items=GROCERY_ITEM_SCHEMA),
        "schedule": ArrayField(items=SCHEDULE_ITEM_SCHEMA),
        "substitutions": ArrayField(items=SUBSTITUTION_SCHEMA),
        "budget_summary": BUDGET_SUMMARY_SCHEMA,
        "nutrition_summary": NUTRITION_SUMMARY_SCHEMA,
    }
)
