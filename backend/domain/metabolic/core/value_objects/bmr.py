"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass

from ..exceptions.domain_errors import InvalidInputError


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production).

    Attributes:
        value: BMR in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            InvalidInputError: If BMR is not positive
        """
        if self.value <= 0:
            raise InvalidInputError(
                f"Biometric data yields a non-positive BMR ({self.value:.2f} kcal/day)",
                field="bmr",
            )

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
