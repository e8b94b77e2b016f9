"""PlanEngine — the main orchestrator that turns a profile into a plan."""

from __future__ import annotations

import logging

from plan_engine.assembler import assemble_plan
from plan_engine.models.enums import SessionFocus
from plan_engine.models.nutrition import NutritionRegimen
from plan_engine.models.plan import PersonalizedPlan
from plan_engine.models.profile import FitnessUser
from plan_engine.models.weekly_plan import DayPlan, RestDay, TrainingDay, WeeklyWorkoutPlan
from plan_engine.nutrition.calculator import calculate_hydration, calculate_macros
from plan_engine.nutrition.meals import build_meal_plan
from plan_engine.nutrition.supplements import recommend_supplements
from plan_engine.training.catalog import split_for
from plan_engine.training.progression import progression_for
from plan_engine.training.schedule import allocate_week
from plan_engine.training.selector import select_exercises
from plan_engine.validation import validate_profile

logger = logging.getLogger(__name__)


class PlanEngine:
    """Validates a profile and builds its training week and nutrition regimen.

    Every call is pure: no I/O, no randomness, no clock reads. The same
    profile always yields an equal plan.

    Usage:
        engine = PlanEngine()
        plan = engine.generate_plan(profile)
        revised = engine.revise_plan(plan, updated_profile)
    """

    def generate_plan(self, profile: FitnessUser) -> PersonalizedPlan:
        """Generate a complete plan for a profile.

        Args:
            profile: The user's onboarding profile.

        Returns:
            A new, immutable PersonalizedPlan (version 1).

        Raises:
            ValidationError: If the profile is malformed.
            ConstraintUnsatisfiable: If a plan invariant cannot be met.
        """
        return self._generate(profile, version=1)

    def revise_plan(
        self, previous: PersonalizedPlan, profile: FitnessUser,
    ) -> PersonalizedPlan:
        """Produce the next version of a plan from an updated profile.

        The previous plan is left untouched; the result is a new plan
        with ``version = previous.version + 1``.
        """
        return self._generate(profile, version=previous.version + 1)

    def _generate(self, profile: FitnessUser, version: int) -> PersonalizedPlan:
        user = validate_profile(profile)

        training = self.build_training_regimen(user)
        nutrition = self.build_nutrition_regimen(user)

        plan = assemble_plan(
            training, nutrition,
            expected_training_days=user.workout_days,
            version=version,
            health_notes=user.additional_health_notes,
        )
        logger.info(
            "Generated plan v%d: %d training / %d rest days, %.0f kcal, %s",
            version,
            training.training_day_count,
            training.rest_day_count,
            nutrition.daily_calorie_target,
            user.goal.name.lower(),
        )
        return plan

    def build_training_regimen(self, user: FitnessUser) -> WeeklyWorkoutPlan:
        """Allocate the week and select exercises for each training day.

        Strength days rotate through the goal's splits in day order.
        """
        days: list[DayPlan] = []
        strength_days = 0
        for slot in allocate_week(user.train_days_per_week, user.cardio_days_per_week):
            if slot.focus is None:
                days.append(RestDay(day=slot.day))
                continue
            split = None
            if slot.focus == SessionFocus.STRENGTH:
                split = split_for(user.goal, strength_days)
                strength_days += 1
            selection = select_exercises(slot.focus, user, split=split)
            days.append(TrainingDay(
                day=slot.day,
                focus=slot.focus,
                exercises=selection.exercises,
                notes=selection.notes,
                workout_name=selection.workout_name,
            ))
        return WeeklyWorkoutPlan(
            days=tuple(days),
            progression=progression_for(user.fitness_level),
        )

    def build_nutrition_regimen(self, user: FitnessUser) -> NutritionRegimen:
        """Derive calorie, macro, meal, hydration and supplement targets."""
        calories = user.daily_calories
        macros = calculate_macros(calories, user.goal)
        return NutritionRegimen(
            daily_calorie_target=calories,
            macro_targets=macros,
            meal_plan=build_meal_plan(calories, macros.grams, user.dietary_restrictions),
            hydration_target_l=calculate_hydration(user.weight_kg),
            supplements=recommend_supplements(user.goal, user.dietary_restrictions),
        )


def generate_plan(profile: FitnessUser) -> PersonalizedPlan:
    """Single entry point: ``generate_plan(profile) -> PersonalizedPlan``."""
    return PlanEngine().generate_plan(profile)
