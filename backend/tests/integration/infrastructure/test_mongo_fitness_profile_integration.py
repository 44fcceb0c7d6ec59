"""Integration tests for MongoFitnessProfileRepository.

Tests actual MongoDB operations against a test database.
Requires REPOSITORY_BACKEND=mongodb and MONGODB_URI to be set.
"""

import os
from dataclasses import replace
from typing import AsyncIterator

import pytest
import pytest_asyncio

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.exceptions.domain_errors import ProfileAlreadyExistsError
from domain.fitness_profile.core.factories.profile_factory import FitnessProfileFactory
from domain.fitness_profile.core.value_objects.health_screening import HealthScreening
from domain.fitness_profile.core.value_objects.profile_id import ProfileId
from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator
from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.metabolic.core.value_objects.sex import Sex
from domain.plan.core.entities.diet import DietDay, DietMeal
from infrastructure.persistence.mongodb import MongoFitnessProfileRepository

pytestmark = pytest.mark.skipif(
    os.getenv("REPOSITORY_BACKEND") != "mongodb" or not os.getenv("MONGODB_URI"),
    reason="MongoDB integration tests require REPOSITORY_BACKEND=mongodb and MONGODB_URI",
)


@pytest_asyncio.fixture
async def mongo_repo() -> AsyncIterator[MongoFitnessProfileRepository]:
    repo = MongoFitnessProfileRepository()
    yield repo
    await repo._collection.delete_many({"user_id": {"$regex": "^test_user_"}})


@pytest.fixture
def sample_profile() -> FitnessProfile:
    biometrics = BiometricProfile(
        sex=Sex.FEMALE,
        age=41,
        weight=72.0,
        height=168.0,
        activity_level=ActivityLevel.LIGHTLY_ACTIVE,
        target_weight_loss_kg=6.0,
    )
    profile = FitnessProfileFactory.create(
        user_id="test_user_001",
        name="Test",
        email="test@example.com",
        biometrics=biometrics,
        deficit=DeficitIntensity.LIGHT,
        stats=MetabolicCalculator().compute_stats(biometrics, DeficitIntensity.LIGHT),
        health_screening=HealthScreening(
            no_heart_conditions=True,
            no_chest_pain_or_dizziness=True,
            no_serious_injuries=True,
            accepts_responsibility=True,
        ),
    )
    profile.set_diet_plan(
        [
            DietDay(
                day_name="Monday",
                total_calories=300,
                meals=[DietMeal(name="Breakfast", description="Oats", calories=300)],
            )
        ]
    )
    return profile


@pytest.mark.asyncio
class TestMongoFitnessProfileRepository:
    async def test_save_and_load(
        self, mongo_repo: MongoFitnessProfileRepository, sample_profile: FitnessProfile
    ) -> None:
        await mongo_repo.save(sample_profile)

        loaded = await mongo_repo.find_by_user_id("test_user_001")
        assert loaded is not None
        assert loaded.profile_id == sample_profile.profile_id
        assert loaded.deficit is DeficitIntensity.LIGHT
        assert loaded.stats == sample_profile.stats
        assert loaded.diet_plan == sample_profile.diet_plan
        assert loaded.health_screening == sample_profile.health_screening

    async def test_save_updates_existing(
        self, mongo_repo: MongoFitnessProfileRepository, sample_profile: FitnessProfile
    ) -> None:
        await mongo_repo.save(sample_profile)
        sample_profile.update_details(name="Renamed")
        await mongo_repo.save(sample_profile)

        loaded = await mongo_repo.find_by_id(sample_profile.profile_id)
        assert loaded is not None
        assert loaded.name == "Renamed"

    async def test_delete(
        self, mongo_repo: MongoFitnessProfileRepository, sample_profile: FitnessProfile
    ) -> None:
        await mongo_repo.save(sample_profile)
        await mongo_repo.delete(sample_profile.profile_id)

        assert not await mongo_repo.exists("test_user_001")

    async def test_second_profile_for_user_rejected(
        self, mongo_repo: MongoFitnessProfileRepository, sample_profile: FitnessProfile
    ) -> None:
        await mongo_repo.save(sample_profile)
        other = replace(sample_profile, profile_id=ProfileId.generate())

        with pytest.raises(ProfileAlreadyExistsError):
            await mongo_repo.save(other)

        loaded = await mongo_repo.find_by_user_id("test_user_001")
        assert loaded is not None
        assert loaded.profile_id == sample_profile.profile_id
