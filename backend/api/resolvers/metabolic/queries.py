"""Query resolvers for metabolic calculations.

- computeStats: stateless BMR/TDEE/target preview
"""

import strawberry

from api.mappers import biometrics_from_input, deficit_from_input, map_stats
from api.types_metabolic import BiometricsInput, CalculatedStatsType, DeficitIntensityEnum
from application.metabolic.queries.compute_stats import (
    ComputeStatsQuery,
    ComputeStatsQueryHandler,
)


@strawberry.type
class MetabolicQueries:
    """GraphQL queries for the metabolic calculator."""

    @strawberry.field
    async def compute_stats(
        self,
        info: strawberry.types.Info,
        input: BiometricsInput,
        deficit: DeficitIntensityEnum = DeficitIntensityEnum.MODERATE,
    ) -> CalculatedStatsType:
        """Compute BMR, TDEE, calorie target and weeks to goal.

        Nothing is stored; used while the user edits values.

        Example:
            query {
              metabolic {
                computeStats(
                  input: {sex: MALE, age: 30, weight: 80, height: 180,
                          activityLevel: MODERATELY_ACTIVE, targetWeightLossKg: 5}
                  deficit: MODERATE
                ) { bmr tdee targetCalories weeksToGoal }
              }
            }
        """
        handler = ComputeStatsQueryHandler(calculator=info.context.get("calculator"))
        stats = await handler.handle(
            ComputeStatsQuery(
                biometrics=biometrics_from_input(input),
                deficit=deficit_from_input(deficit),
            )
        )
        return map_stats(stats)
