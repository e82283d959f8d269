"""Exceptions raised by the diet planner."""


class DietPlannerError(Exception):
    """Base class for diet planner errors."""


class ProfileValidationError(DietPlannerError):
    """Raised when profile data is missing or out of range."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        super().__init__("Validation error")
        self.errors = errors


class ConfigurationError(DietPlannerError):
    """Raised when a lookup table has no entry for an enumerated value."""


class NotFoundError(DietPlannerError):
    """Raised when a profile or plan does not exist."""


class RenderingError(DietPlannerError):
    """Raised when a plan document cannot be rendered."""
