"""MongoDB implementation of IFitnessProfileRepository."""

from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.exceptions.domain_errors import ProfileAlreadyExistsError
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.fitness_profile.core.value_objects.health_screening import HealthScreening
from domain.fitness_profile.core.value_objects.profile_id import ProfileId
from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.metabolic.core.value_objects.sex import Sex
from domain.plan.core.entities.diet import DietDay, DietMeal, MacroBreakdown
from domain.plan.core.entities.workout import Exercise, WorkoutDay
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.muscle_group import MuscleGroup
from domain.plan.core.value_objects.workout_duration import WorkoutDuration
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences

from .base import MongoBaseRepository


class MongoFitnessProfileRepository(
    MongoBaseRepository[FitnessProfile],
    IFitnessProfileRepository,
):
    """MongoDB implementation of fitness profile repository.

    One document per profile, keyed by profile ID, with plans embedded.
    A unique index on ``user_id`` keeps a single profile per user; it is
    created on the first save.
    """

    _indexes_ready = False

    @property
    def collection_name(self) -> str:
        return "fitness_profiles"

    def to_document(self, entity: FitnessProfile) -> Dict[str, Any]:
        """Convert FitnessProfile entity to MongoDB document."""
        profile = entity
        return {
            "_id": self.uuid_to_str(profile.profile_id.value),
            "profile_id": self.uuid_to_str(profile.profile_id.value),
            "user_id": profile.user_id,
            "name": profile.name,
            "email": profile.email,
            "biometrics": {
                "sex": profile.biometrics.sex.value,
                "age": profile.biometrics.age,
                "weight": profile.biometrics.weight,
                "height": profile.biometrics.height,
                "activity_level": profile.biometrics.activity_level.value,
                "target_weight_loss_kg": profile.biometrics.target_weight_loss_kg,
            },
            "deficit": profile.deficit.value,
            "stats": {
                "bmr": profile.stats.bmr,
                "tdee": profile.stats.tdee,
                "target_calories": profile.stats.target_calories,
                "weeks_to_goal": profile.stats.weeks_to_goal,
            },
            "diet_preferences": {
                "available_foods": profile.diet_preferences.available_foods,
            },
            "workout_preferences": {
                "workout_days": profile.workout_preferences.workout_days,
                "workout_duration": profile.workout_preferences.workout_duration.value,
                "target_muscles": [m.value for m in profile.workout_preferences.target_muscles],
            },
            "diet_plan": [_diet_day_to_document(day) for day in profile.diet_plan],
            "workout_plan": [_workout_day_to_document(day) for day in profile.workout_plan],
            "health_screening": self._screening_to_document(profile.health_screening),
            "created_at": self.datetime_to_iso(profile.created_at),
            "updated_at": self.datetime_to_iso(profile.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> FitnessProfile:
        """Convert MongoDB document to FitnessProfile entity.

        Documents written before the deficit was stored load with the
        default intensity; those without a health screening load with none.
        """
        biometrics = doc["biometrics"]
        stats = doc["stats"]
        workout = doc.get("workout_preferences", {})

        return FitnessProfile(
            profile_id=ProfileId(self.str_to_uuid(doc["profile_id"])),
            user_id=doc["user_id"],
            name=doc.get("name", ""),
            email=doc.get("email", ""),
            biometrics=BiometricProfile(
                sex=Sex(biometrics["sex"]),
                age=biometrics["age"],
                weight=biometrics["weight"],
                height=biometrics["height"],
                activity_level=ActivityLevel(biometrics["activity_level"]),
                target_weight_loss_kg=biometrics.get("target_weight_loss_kg", 0.0),
            ),
            deficit=DeficitIntensity(doc.get("deficit", DeficitIntensity.default().value)),
            stats=CalculatedStats(
                bmr=stats["bmr"],
                tdee=stats["tdee"],
                target_calories=stats["target_calories"],
                weeks_to_goal=stats["weeks_to_goal"],
            ),
            diet_preferences=DietPreferences(
                available_foods=doc.get("diet_preferences", {}).get("available_foods", ""),
            ),
            workout_preferences=WorkoutPreferences(
                workout_days=workout.get("workout_days", 3),
                workout_duration=WorkoutDuration(
                    workout.get("workout_duration", WorkoutDuration.UP_TO_1_HOUR.value)
                ),
                target_muscles=tuple(MuscleGroup(m) for m in workout.get("target_muscles", [])),
            ),
            diet_plan=[_diet_day_from_document(day) for day in doc.get("diet_plan", [])],
            workout_plan=[_workout_day_from_document(day) for day in doc.get("workout_plan", [])],
            health_screening=self._screening_from_document(doc.get("health_screening")),
            created_at=self.iso_to_datetime(doc["created_at"]),
            updated_at=self.iso_to_datetime(doc["updated_at"]),
        )

    def _screening_to_document(
        self, screening: Optional[HealthScreening]
    ) -> Optional[Dict[str, Any]]:
        if screening is None:
            return None
        return {
            "no_heart_conditions": screening.no_heart_conditions,
            "no_chest_pain_or_dizziness": screening.no_chest_pain_or_dizziness,
            "no_serious_injuries": screening.no_serious_injuries,
            "accepts_responsibility": screening.accepts_responsibility,
            "confirmed_at": self.datetime_to_iso(screening.confirmed_at),
        }

    def _screening_from_document(
        self, doc: Optional[Dict[str, Any]]
    ) -> Optional[HealthScreening]:
        if not doc:
            return None
        return HealthScreening(
            no_heart_conditions=doc["no_heart_conditions"],
            no_chest_pain_or_dizziness=doc["no_chest_pain_or_dizziness"],
            no_serious_injuries=doc["no_serious_injuries"],
            accepts_responsibility=doc["accepts_responsibility"],
            confirmed_at=self.iso_to_datetime(doc["confirmed_at"]),
        )

    async def _ensure_indexes(self) -> None:
        if self._indexes_ready:
            return
        await self._guarded(
            "create_index",
            {},
            self._collection.create_index("user_id", unique=True, name="user_id_unique"),
        )
        self._indexes_ready = True

    async def save(self, profile: FitnessProfile) -> None:
        """Save profile (create or update).

        Raises:
            ProfileAlreadyExistsError: If another profile exists for the user
        """
        await self._ensure_indexes()
        try:
            await self._upsert(self.to_document(profile))
        except DuplicateKeyError as e:
            raise ProfileAlreadyExistsError(profile.user_id) from e

    async def find_by_id(self, profile_id: ProfileId) -> Optional[FitnessProfile]:
        doc = await self._find_one({"_id": self.uuid_to_str(profile_id.value)})
        if doc is None:
            return None
        return self.from_document(doc)

    async def find_by_user_id(self, user_id: str) -> Optional[FitnessProfile]:
        doc = await self._find_one({"user_id": user_id})
        if doc is None:
            return None
        return self.from_document(doc)

    async def delete(self, profile_id: ProfileId) -> None:
        await self._delete_one({"_id": self.uuid_to_str(profile_id.value)})

    async def exists(self, user_id: str) -> bool:
        doc = await self._find_one({"user_id": user_id}, projection={"_id": 1})
        return doc is not None


def _diet_day_to_document(day: DietDay) -> Dict[str, Any]:
    return {
        "day_name": day.day_name,
        "total_calories": day.total_calories,
        "meals": [
            {
                "name": meal.name,
                "description": meal.description,
                "calories": meal.calories,
                "macros": {
                    "protein": meal.macros.protein,
                    "carbs": meal.macros.carbs,
                    "fats": meal.macros.fats,
                },
            }
            for meal in day.meals
        ],
    }


def _diet_day_from_document(doc: Dict[str, Any]) -> DietDay:
    meals: List[DietMeal] = []
    for meal in doc.get("meals", []):
        macros = meal.get("macros", {})
        meals.append(
            DietMeal(
                name=meal["name"],
                description=meal.get("description", ""),
                calories=meal["calories"],
                macros=MacroBreakdown(
                    protein=macros.get("protein", ""),
                    carbs=macros.get("carbs", ""),
                    fats=macros.get("fats", ""),
                ),
            )
        )
    return DietDay(day_name=doc["day_name"], total_calories=doc["total_calories"], meals=meals)


def _workout_day_to_document(day: WorkoutDay) -> Dict[str, Any]:
    return {
        "day_name": day.day_name,
        "focus": day.focus,
        "duration": day.duration,
        "cardio": day.cardio,
        "exercises": [
            {
                "name": exercise.name,
                "sets": exercise.sets,
                "reps": exercise.reps,
                "rest": exercise.rest,
                "notes": exercise.notes,
            }
            for exercise in day.exercises
        ],
    }


def _workout_day_from_document(doc: Dict[str, Any]) -> WorkoutDay:
    return WorkoutDay(
        day_name=doc["day_name"],
        focus=doc.get("focus", ""),
        duration=doc.get("duration", ""),
        cardio=doc.get("cardio", ""),
        exercises=[
            Exercise(
                name=exercise["name"],
                sets=exercise.get("sets", 0),
                reps=exercise.get("reps", ""),
                rest=exercise.get("rest", ""),
                notes=exercise.get("notes", ""),
            )
            for exercise in doc.get("exercises", [])
        ],
    )
