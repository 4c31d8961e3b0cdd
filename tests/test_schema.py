"""Tests for output schema rendering."""

from quickchef.services.schema import (
    GROCERY_CATEGORIES,
    MEAL_SCHEMA,
    PLAN_SCHEMA,
    ArrayField,
    EnumField,
    IntegerField,
    ObjectField,
    StringField,
    to_json_schema,
)


def test_object_lists_every_property_as_required() -> None:
    schema = to_json_schema(
        ObjectField(
            properties={"name": StringField(), "count": IntegerField(minimum=0)},
            optional=frozenset({"count"}),
            description="Thing",
        )
    )

    assert schema == {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "count": {"anyOf": [{"type": "integer", "minimum": 0}, {"type": "null"}]},
        },
        "required": ["name", "count"],
        "additionalProperties": False,
        "description": "Thing",
    }


def test_array_and_enum_rendering() -> None:
    schema = to_json_schema(ArrayField(items=EnumField(values=("shop", "cook"))))

    assert schema == {"type": "array", "items": {"type": "string", "enum": ["shop", "cook"]}}


def test_meal_schema_marks_optional_fields_nullable() -> None:
    schema = to_json_schema(MEAL_SCHEMA)
    properties = schema["properties"]

    assert "leftover_strategy" in schema["required"]
    assert properties["leftover_strategy"] == {
        "anyOf": [{"type": "string"}, {"type": "null"}]
    }
    assert properties["name"] == {"type": "string"}
    assert properties["prep_checklist"]["required"] == [
        "washing",
        "chopping",
        "marinating",
    ]


def test_plan_schema_enumerates_categories_and_task_types() -> None:
    schema = to_json_schema(PLAN_SCHEMA)
    grocery = schema["properties"]["grocery_list"]["items"]
    schedule = schema["properties"]["schedule"]["items"]

    assert grocery["properties"]["category"]["enum"] == list(GROCERY_CATEGORIES)
    assert schedule["properties"]["type"]["enum"] == ["shop", "prep", "cook"]
    assert schema["required"] == [
        "days",
        "grocery_list",
        "schedule",
        "substitutions",
        "budget_summary",
        "nutrition_summary",
    ]
    day_meals = schema["properties"]["days"]["items"]["properties"]["meals"]
    assert day_meals["properties"]["dinner"] == to_json_schema(MEAL_SCHEMA)
