"""Deterministic identity for cooking requests."""

import json

from quickchef.domain.requests import CookingRequest


def request_identity(request: CookingRequest) -> str:
    """Return the cache and deduplication identity of a request.

    Only persona, goals, diet, ingredients, dislikes, effort and protein
    take part. Order-irrelevant collections are sorted so reordering them
    never changes the identity.
    """
    payload = {
        "persona": request.persona,
        "goals": sorted(request.goals),
        "diet": str(request.diet),
        "ingredients": sorted(
            f"{item.name}:{str(item.locked).lower()}" for item in request.ingredients
        ),
        "dislikes": sorted(request.dislikes),
        "effort": request.effort_level,
        "protein": request.protein_level,
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))
