"""Error types raised by the planning services."""


class QuickChefError(Exception):
    """Base class for planner errors."""


class ValidationError(QuickChefError):
    """Request failed structural checks before any external call."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class GenerationError(QuickChefError):
    """External generation call or its processing failed."""


class EmptyResponseError(GenerationError):
    """External generation call returned no content."""


class SchemaMismatchError(GenerationError):
    """Returned content did not parse into the expected structure."""
