"""PlanAssembler — composes the training and nutrition halves into one plan.

Assembly does no decision-making of its own; it re-checks the plan
invariants as postconditions and refuses to return a plan that breaks one.
"""

from __future__ import annotations

from plan_engine.exceptions import ConstraintUnsatisfiable
from plan_engine.models.enums import (
    BASELINE_SUPPLEMENTS,
    DAYS_PER_WEEK,
    MIN_HYDRATION_L,
    MealType,
    Weekday,
)
from plan_engine.models.nutrition import NutritionRegimen
from plan_engine.models.plan import PersonalizedPlan
from plan_engine.models.weekly_plan import RestDay, TrainingDay, WeeklyWorkoutPlan


def check_training_regimen(week: WeeklyWorkoutPlan, expected_training_days: int) -> None:
    """Raise ConstraintUnsatisfiable if the week breaks a schedule invariant."""
    if len(week.days) != DAYS_PER_WEEK:
        raise ConstraintUnsatisfiable(
            f"Week has {len(week.days)} days, expected {DAYS_PER_WEEK}"
        )
    if tuple(d.day for d in week.days) != tuple(Weekday):
        raise ConstraintUnsatisfiable("Days are not in Monday..Sunday order")

    for entry in week.days:
        if isinstance(entry, TrainingDay):
            if not entry.exercises:
                raise ConstraintUnsatisfiable(f"{entry.day.name} has no exercises")
        elif not isinstance(entry, RestDay):
            raise ConstraintUnsatisfiable(f"Unknown day entry {entry!r}")

    if week.training_day_count != expected_training_days:
        raise ConstraintUnsatisfiable(
            f"{week.training_day_count} training days, expected {expected_training_days}"
        )


def check_nutrition_regimen(regimen: NutritionRegimen) -> None:
    """Raise ConstraintUnsatisfiable if the regimen breaks a nutrition invariant."""
    if regimen.daily_calorie_target <= 0:
        raise ConstraintUnsatisfiable("Daily calorie target must be positive")
    if regimen.macro_targets.percentage_total != 100:
        raise ConstraintUnsatisfiable(
            f"Macro percentages sum to {regimen.macro_targets.percentage_total}, not 100"
        )

    meal_types = tuple(m.meal_type for m in regimen.meal_plan)
    if meal_types != tuple(MealType):
        raise ConstraintUnsatisfiable(
            f"Meal plan must hold each meal type once, got {[m.name for m in meal_types]}"
        )
    for meal in regimen.meal_plan:
        if not meal.suggestions:
            raise ConstraintUnsatisfiable(f"{meal.meal_type.name} has no suggestions")

    if regimen.hydration_target_l < MIN_HYDRATION_L:
        raise ConstraintUnsatisfiable(
            f"Hydration target {regimen.hydration_target_l} L below {MIN_HYDRATION_L} L"
        )
    missing = [s for s in BASELINE_SUPPLEMENTS if s not in regimen.supplements]
    if missing:
        raise ConstraintUnsatisfiable(f"Missing baseline supplements: {missing}")


def assemble_plan(
    training: WeeklyWorkoutPlan,
    nutrition: NutritionRegimen,
    expected_training_days: int,
    version: int = 1,
    health_notes: str | None = None,
) -> PersonalizedPlan:
    """Pair a training week with a nutrition regimen after checking both.

    Raises:
        ConstraintUnsatisfiable: If any plan invariant does not hold.
    """
    check_training_regimen(training, expected_training_days)
    check_nutrition_regimen(nutrition)
    return PersonalizedPlan(
        training_regimen=training,
        nutrition_regimen=nutrition,
        version=version,
        health_notes=health_notes,
    )
