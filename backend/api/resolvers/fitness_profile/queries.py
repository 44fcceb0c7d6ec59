"""Query resolvers for fitness profile domain.

- profile: Get a user's fitness profile with stats and plans
"""

from typing import Optional

import strawberry

from api.mappers import map_profile
from api.types_fitness_profile import FitnessProfileType
from application.fitness_profile.queries.get_profile import (
    GetFitnessProfileQuery,
    GetFitnessProfileQueryHandler,
)
from domain.fitness_profile.core.exceptions.domain_errors import FitnessProfileNotFoundError


@strawberry.type
class FitnessProfileQueries:
    """GraphQL queries for fitness profile domain."""

    @strawberry.field
    async def profile(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[FitnessProfileType]:
        """Get fitness profile by user ID.

        Returns:
            FitnessProfileType or None if the user has no profile

        Example:
            query {
              fitnessProfile {
                profile(userId: "user123") {
                  stats { targetCalories }
                  dietPlan { dayName totalCalories }
                }
              }
            }
        """
        repository = info.context.get("profile_repository")
        if repository is None:
            raise Exception("Missing dependencies in GraphQL context")

        handler = GetFitnessProfileQueryHandler(repository=repository)
        try:
            profile = await handler.handle(GetFitnessProfileQuery(user_id=user_id))
        except FitnessProfileNotFoundError:
            return None
        return map_profile(profile)
