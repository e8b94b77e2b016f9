"""PersonalizedPlan — the final output of the plan engine."""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.models.nutrition import NutritionRegimen
from plan_engine.models.weekly_plan import WeeklyWorkoutPlan


@dataclass(frozen=True)
class PersonalizedPlan:
    """Immutable pairing of a training week and a nutrition regimen.

    Plans are never edited in place; a revision is a new plan with a
    higher ``version``. ``health_notes`` carries the user's free-text
    health notes through unchanged for whoever reviews the plan.
    """

    training_regimen: WeeklyWorkoutPlan
    nutrition_regimen: NutritionRegimen
    version: int = 1
    health_notes: str | None = None
