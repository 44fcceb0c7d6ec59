"""Unit tests for ComputeStatsQuery."""

from unittest.mock import Mock

import pytest

from application.metabolic.queries import ComputeStatsQuery, ComputeStatsQueryHandler
from domain.metabolic import MetabolicCalculator
from domain.metabolic.core.exceptions import InvalidInputError
from domain.metabolic.core.value_objects import (
    BiometricProfile,
    CalculatedStats,
    DeficitIntensity,
)


class TestComputeStatsQuery:
    @pytest.mark.asyncio
    async def test_default_calculator(self, biometrics: BiometricProfile) -> None:
        stats = await ComputeStatsQueryHandler().handle(ComputeStatsQuery(biometrics=biometrics))

        assert stats.target_calories == 1775

    @pytest.mark.asyncio
    async def test_uses_injected_calculator(self, biometrics: BiometricProfile) -> None:
        calculator = Mock(spec=MetabolicCalculator)
        calculator.compute_stats.return_value = CalculatedStats(
            bmr=1, tdee=2, target_calories=1, weeks_to_goal=0
        )

        await ComputeStatsQueryHandler(calculator).handle(
            ComputeStatsQuery(biometrics=biometrics, deficit=DeficitIntensity.LIGHT)
        )

        calculator.compute_stats.assert_called_once_with(biometrics, DeficitIntensity.LIGHT)

    @pytest.mark.asyncio
    async def test_invalid_deficit(self, biometrics: BiometricProfile) -> None:
        with pytest.raises(InvalidInputError):
            await ComputeStatsQueryHandler().handle(
                ComputeStatsQuery(biometrics=biometrics, deficit="huge")  # type: ignore[arg-type]
            )
