"""JSON serialization for PersonalizedPlan objects.

Produces the camelCase document shape the persistence store and the
presentation layer expect: ``trainingRegimen`` is seven ``{day, workout}``
entries where ``workout`` is null on rest days.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from plan_engine.models.enums import label
from plan_engine.models.exercise import ExerciseTemplate
from plan_engine.models.nutrition import (
    MacroGrams,
    MealPlanTemplate,
    MealSuggestion,
    NutritionRegimen,
)
from plan_engine.models.plan import PersonalizedPlan
from plan_engine.models.weekly_plan import DayPlan, TrainingDay, WeeklyWorkoutPlan


def to_plan_dict(plan: PersonalizedPlan) -> dict:
    """Convert a PersonalizedPlan to a JSON-ready dict."""
    return {
        "version": plan.version,
        "trainingRegimen": [_convert_day(d) for d in plan.training_regimen.days],
        "progression": _convert_progression(plan.training_regimen),
        "estimatedWeeklyCaloriesBurned": plan.training_regimen.estimated_calories_burned,
        "nutritionRegimen": _convert_nutrition(plan.nutrition_regimen),
        "healthNotes": plan.health_notes,
    }


def to_plan_json_string(plan: PersonalizedPlan, indent: int = 2) -> str:
    """Convert a PersonalizedPlan to a JSON string."""
    return json.dumps(to_plan_dict(plan), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_day(entry: DayPlan) -> dict:
    if isinstance(entry, TrainingDay):
        return {
            "day": label(entry.day),
            "focus": label(entry.focus),
            "workoutName": entry.workout_name,
            "workout": [_convert_exercise(e) for e in entry.exercises],
            "notes": list(entry.notes),
        }
    return {"day": label(entry.day), "workout": None}


def _convert_exercise(exercise: ExerciseTemplate) -> dict:
    result: dict = {
        "name": exercise.name,
        "type": label(exercise.kind),
        "restTime": exercise.rest_time_s,
        "instructions": list(exercise.instructions),
        "muscleGroups": list(exercise.muscle_groups),
        "modifications": {},
        "estimatedCalories": exercise.estimated_calories,
    }
    if exercise.sets is not None:
        result["numberOfSets"] = exercise.sets
    if exercise.reps is not None:
        result["reps"] = exercise.reps
    if exercise.duration_s is not None:
        result["duration"] = exercise.duration_s
    if exercise.beginner_modification:
        result["modifications"]["beginner"] = exercise.beginner_modification
    if exercise.advanced_modification:
        result["modifications"]["advanced"] = exercise.advanced_modification
    return result


def _convert_progression(week: WeeklyWorkoutPlan) -> dict | None:
    progression = week.progression
    if progression is None:
        return None
    return {
        "phase": label(progression.phase),
        "durationWeeks": progression.duration_weeks,
        "nextPhase": label(progression.next_phase) if progression.next_phase else None,
    }


def _convert_macros(macros: MacroGrams) -> dict:
    return {"protein": macros.protein, "carbs": macros.carbs, "fat": macros.fat}


def _convert_suggestion(suggestion: MealSuggestion) -> dict:
    return {
        "name": suggestion.name,
        "ingredients": list(suggestion.ingredients),
        "calories": suggestion.calories,
        "macros": _convert_macros(suggestion.macros),
        "prepTime": suggestion.prep_time_min,
        "difficulty": label(suggestion.difficulty),
    }


def _convert_meal(meal: MealPlanTemplate) -> dict:
    return {
        "mealType": label(meal.meal_type),
        "targetCalories": meal.target_calories,
        "targetMacros": _convert_macros(meal.target_macros),
        "suggestions": [_convert_suggestion(s) for s in meal.suggestions],
    }


def _convert_nutrition(regimen: NutritionRegimen) -> dict:
    macros = regimen.macro_targets
    return {
        "dailyCalorieTarget": regimen.daily_calorie_target,
        "macroTargets": {
            "protein": macros.protein,
            "carbs": macros.carbs,
            "fat": macros.fat,
            "proteinPercentage": macros.protein_percentage,
            "carbsPercentage": macros.carbs_percentage,
            "fatPercentage": macros.fat_percentage,
        },
        "mealPlan": [_convert_meal(m) for m in regimen.meal_plan],
        "hydrationTarget": regimen.hydration_target_l,
        "supplements": list(regimen.supplements),
    }
