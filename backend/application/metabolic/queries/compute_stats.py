"""ComputeStatsQuery - stateless preview of calorie targets."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputeStatsQuery:
    """Query to compute stats without touching any stored profile.

    Used while the user edits biometrics or moves the deficit selector.

    Attributes:
        biometrics: Biometric and activity data
        deficit: Deficit intensity (defaults to moderate)
    """

    biometrics: BiometricProfile
    deficit: DeficitIntensity = DeficitIntensity.MODERATE


class ComputeStatsQueryHandler:
    """Handler for ComputeStatsQuery."""

    def __init__(self, calculator: Optional[MetabolicCalculator] = None):
        self._calculator = calculator or MetabolicCalculator()

    async def handle(self, query: ComputeStatsQuery) -> CalculatedStats:
        """
        Compute BMR, TDEE, calorie target and weeks to goal.

        Raises:
            InvalidInputError: If the biometrics or deficit are invalid
        """
        stats = self._calculator.compute_stats(query.biometrics, query.deficit)

        logger.debug(
            "Stats computed",
            extra={
                "deficit": query.deficit.value,
                "tdee": stats.tdee,
                "target_calories": stats.target_calories,
            },
        )
        return stats
