"""Domain exceptions for diet and workout plans."""


class PlanDomainError(Exception):
    """Base exception for plan domain errors."""

    pass


class InvalidPlanDataError(PlanDomainError):
    """Raised when a plan entity violates its invariants."""

    pass


class InvalidWorkoutPreferencesError(PlanDomainError):
    """Raised when workout preferences cannot drive plan generation."""

    pass


class PlanGenerationError(PlanDomainError):
    """Raised when the plan generator fails to produce a usable plan."""

    def __init__(self, operation: str, reason: str):
        super().__init__(f"Plan generation failed ({operation}): {reason}")
        self.operation = operation
        self.reason = reason
