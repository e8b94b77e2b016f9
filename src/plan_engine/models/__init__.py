"""Data models for the plan engine."""

from plan_engine.models.enums import (
    Difficulty,
    ExerciseKind,
    ExperienceLevel,
    Goal,
    MealType,
    ProgressionPhase,
    SessionFocus,
    Weekday,
)
from plan_engine.models.exercise import ExerciseTemplate, WorkoutSplit
from plan_engine.models.nutrition import (
    MacroGrams,
    MacroTargets,
    MealPlanTemplate,
    MealSuggestion,
    NutritionRegimen,
)
from plan_engine.models.plan import PersonalizedPlan
from plan_engine.models.profile import FitnessUser
from plan_engine.models.weekly_plan import (
    DayPlan,
    ProgressionPlan,
    RestDay,
    TrainingDay,
    WeeklyWorkoutPlan,
)

__all__ = [
    "DayPlan",
    "Difficulty",
    "ExerciseKind",
    "ExerciseTemplate",
    "ExperienceLevel",
    "FitnessUser",
    "Goal",
    "MacroGrams",
    "MacroTargets",
    "MealPlanTemplate",
    "MealSuggestion",
    "MealType",
    "NutritionRegimen",
    "PersonalizedPlan",
    "ProgressionPhase",
    "ProgressionPlan",
    "RestDay",
    "SessionFocus",
    "TrainingDay",
    "Weekday",
    "WeeklyWorkoutPlan",
    "WorkoutSplit",
]
