"""HealthScreening value object - pre-onboarding health acknowledgement."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from ..exceptions.domain_errors import InvalidProfileDataError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HealthScreening:
    """Answers to the health questionnaire shown before any calculation.

    A user may be onboarded only when every statement is confirmed.

    Attributes:
        no_heart_conditions: No diagnosed heart problems
        no_chest_pain_or_dizziness: No chest pain or frequent dizziness
            during physical effort
        no_serious_injuries: No serious bone or joint injuries
        accepts_responsibility: The answers are truthful, the user takes
            full responsibility, and understands the plans do not replace
            medical supervision
        confirmed_at: When the answers were given (UTC)
    """

    no_heart_conditions: bool
    no_chest_pain_or_dizziness: bool
    no_serious_injuries: bool
    accepts_responsibility: bool
    confirmed_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.confirmed_at.tzinfo is None:
            raise InvalidProfileDataError("Health screening timestamp must be timezone-aware")

    def unconfirmed(self) -> List[str]:
        """Names of the statements that were not confirmed."""
        answers = {
            "no_heart_conditions": self.no_heart_conditions,
            "no_chest_pain_or_dizziness": self.no_chest_pain_or_dizziness,
            "no_serious_injuries": self.no_serious_injuries,
            "accepts_responsibility": self.accepts_responsibility,
        }
        return [name for name, confirmed in answers.items() if not confirmed]

    def is_complete(self) -> bool:
        return not self.unconfirmed()

    def ensure_complete(self) -> None:
        """
        Raises:
            InvalidProfileDataError: If any statement is not confirmed
        """
        missing = self.unconfirmed()
        if missing:
            raise InvalidProfileDataError(
                f"Health screening not confirmed: {', '.join(missing)}"
            )
