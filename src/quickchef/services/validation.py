"""Pre-flight checks for cooking requests."""

from quickchef.domain.requests import CookingRequest

MIN_INGREDIENTS = 3
MIN_TIME_AVAILABLE = 5


def validate_request(request: CookingRequest) -> list[str]:
    """Return human-readable problems; an empty list means the request is usable."""
    errors: list[str] = []
    if len(request.ingredients) < MIN_INGREDIENTS:
        errors.append(f"Add at least {MIN_INGREDIENTS} ingredients.")
    if request.time_available < MIN_TIME_AVAILABLE:
        errors.append(f"Cooking time must be at least {MIN_TIME_AVAILABLE} minutes.")
    return errors
