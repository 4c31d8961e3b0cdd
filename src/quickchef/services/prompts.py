"""Prompt builders for plan generation and meal mutations."""

from quickchef.domain.plans import Meal, SwapRequest
from quickchef.domain.requests import CookingRequest, KitchenSetup

REPLACE_CRITERIA_DEFAULT = "Variety / Different Style"


def _join(values: list[str] | tuple[str, ...], empty: str = "None") -> str:
    return ", ".join(values) or empty


def build_system_instruction(request: CookingRequest) -> str:
    """Describe the assistant role and hard kitchen rules."""
    lines = [
        f"You are a smart cooking assistant for a {request.persona}.",
        f"Constraint: Kitchen Setup is {request.kitchen_setup}.",
        "Rules:",
    ]
    if request.kitchen_setup == KitchenSetup.BASIC:
        lines.append("- NO OVEN, NO AIR FRYER. Use pressure cooker or stovetop.")
    lines.extend(
        [
            f"- Respect Budget: {request.budget_level}.",
            f"- Effort Level: {request.effort_level}.",
            f"- Protein Preference: {request.protein_level}.",
            f"- Goal: {_join(request.goals)}.",
        ]
    )
    return "\n".join(lines)


def build_plan_prompt(request: CookingRequest) -> str:
    """Build the full-plan generation instruction."""
    return "\n".join(
        [
            f"Generate a {request.days}-day meal plan.",
            "Each day MUST include breakfast, lunch and dinner.",
            "",
            "CONTEXT:",
            f"- Persona: {request.persona}",
            f"- Diet: {request.diet}",
            f"- Dislikes: {_join(request.dislikes)}",
            f"- Time/Meal: {request.time_available}m",
            f"- Day energy: {request.day_type}",
            f"- Budget: {request.budget_level}",
            f"- Effort: {request.effort_level} (adjust complexity accordingly)",
            f"- Protein: {request.protein_level}",
            "",
            "PANTRY RULES:",
            f"1. MUST USE (Locked): {_join(request.locked_ingredients)}",
            f"2. Available: {_join(request.available_ingredients)}",
            "",
            "OUTPUT REQUIREMENTS:",
            "- Detailed step-by-step recipes (6-10 steps).",
            f"- Cooking methods MUST match kitchen setup ({request.kitchen_setup}).",
            "- Reuse ingredients across meals to reduce cost.",
            "- Group grocery items by category.",
            "- Include schedule (shop/prep/cook) optimization.",
            "- Suggest substitutions only when the budget is low.",
        ]
    )


def build_replace_prompt(meal: Meal, criteria: str, request: CookingRequest) -> str:
    """Build the instruction to replace a meal with a different one."""
    return "\n".join(
        [
            "Replace this recipe with a DIFFERENT one.",
            f"Original Meal: {meal.name} ({meal.description})",
            "",
            f'Replacement Criteria: "{criteria}"',
            "",
            "Constraints:",
            f"- Diet: {request.diet}",
            f"- Kitchen: {request.kitchen_setup}",
            f"- Effort: {request.effort_level}",
            f"- Protein: {request.protein_level}",
            f"- Dislikes: {_join(request.dislikes)}",
            "",
            "Output:",
            "- Fully updated JSON for the single Meal object.",
            "- Maintain strict schema.",
            "- Generate a NEW unique ID.",
        ]
    )


def build_swap_prompt(
    meal: Meal, swaps: list[SwapRequest], request: CookingRequest
) -> str:
    """Build the instruction to swap ingredients inside a meal."""
    instructions = []
    for swap in swaps:
        if swap.has_replacement:
            target = f'"{swap.replacement.strip()}"'
        else:
            target = (
                f"the BEST SUBSTITUTE fitting the diet ({request.diet}) "
                f"and budget ({request.budget_level})"
            )
        instructions.append(f'- Replace "{swap.ingredient}" with {target}.')
    pantry = [item.name for item in request.ingredients]
    return "\n".join(
        [
            "Modify this recipe based on user swaps.",
            f"Original Recipe: {meal.model_dump_json()}",
            "",
            "User Swaps:",
            *instructions,
            "",
            "Constraints:",
            f"- Diet: {request.diet}",
            f"- Kitchen: {request.kitchen_setup}",
            f"- Pantry: {_join(pantry)}",
            "",
            "Output:",
            "- Fully updated JSON for the single Meal object.",
            "- Recalculate nutrition, step_by_step_recipe, and ingredient quantities.",
            f'- Keep ID same as original: "{meal.id}"',
        ]
    )
