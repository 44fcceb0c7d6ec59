"""BiometricProfile value object - input of the metabolic calculation."""

import math
from dataclasses import dataclass, replace
from typing import Optional

from ..exceptions.domain_errors import InvalidInputError
from .activity_level import ActivityLevel
from .sex import Sex


@dataclass(frozen=True)
class BiometricProfile:
    """User biometric and activity data.

    Immutable value object holding everything the calculator needs.
    Validation is eager: an invalid profile cannot be constructed.

    Attributes:
        sex: Biological sex
        age: Age in years (> 0)
        weight: Body weight in kilograms (> 0)
        height: Height in centimeters (> 0)
        activity_level: Physical activity tier
        target_weight_loss_kg: Weight the user wants to lose (>= 0)
    """

    sex: Sex
    age: int
    weight: float
    height: float
    activity_level: ActivityLevel
    target_weight_loss_kg: float = 0.0

    def __post_init__(self) -> None:
        """Validate biometric constraints.

        Raises:
            InvalidInputError: If any constraint is violated
        """
        if not isinstance(self.sex, Sex):
            raise InvalidInputError(f"Unknown sex: {self.sex!r}", field="sex")

        if not isinstance(self.activity_level, ActivityLevel):
            raise InvalidInputError(
                f"Unknown activity level: {self.activity_level!r}",
                field="activity_level",
            )

        _require_positive("weight", self.weight, "kg")
        _require_positive("height", self.height, "cm")
        _require_positive("age", self.age, "years")

        if not math.isfinite(self.target_weight_loss_kg) or self.target_weight_loss_kg < 0:
            raise InvalidInputError(
                "Target weight loss must be a non-negative number, "
                f"got {self.target_weight_loss_kg}",
                field="target_weight_loss_kg",
            )

    def with_changes(
        self,
        age: Optional[int] = None,
        weight: Optional[float] = None,
        height: Optional[float] = None,
        sex: Optional[Sex] = None,
        activity_level: Optional[ActivityLevel] = None,
        target_weight_loss_kg: Optional[float] = None,
    ) -> "BiometricProfile":
        """Return a copy with the given fields replaced.

        Fields left as None keep their current value. The copy is
        validated like any new profile.
        """
        changes = {
            "age": age,
            "weight": weight,
            "height": height,
            "sex": sex,
            "activity_level": activity_level,
            "target_weight_loss_kg": target_weight_loss_kg,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _require_positive(field: str, value: float, unit: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{field.capitalize()} must be a number, got {value!r}", field)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(
            f"{field.capitalize()} must be positive, got {value} {unit}", field
        )
