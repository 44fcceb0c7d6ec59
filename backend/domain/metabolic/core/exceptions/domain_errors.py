"""Domain exceptions for metabolic calculations."""


class MetabolicDomainError(Exception):
    """Base exception for metabolic domain errors."""

    pass


class InvalidInputError(MetabolicDomainError):
    """Raised when biometric input cannot produce a meaningful calculation.

    Covers non-positive weight, height or age, a negative weight loss
    target and values that are not finite numbers.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
