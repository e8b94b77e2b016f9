"""Utility helpers bridging the Streamlit UI and the plan engine.

Pure functions for formatting, table construction, profile construction,
and profile persistence.
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from plan_engine.models.enums import MealType, SessionFocus, label
from plan_engine.models.exercise import ExerciseTemplate
from plan_engine.models.nutrition import MacroTargets, MealPlanTemplate
from plan_engine.models.profile import FitnessUser
from plan_engine.models.weekly_plan import TrainingDay, WeeklyWorkoutPlan
from plan_engine.serialization import profile_from_dict

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_seconds(seconds: int | None) -> str:
    """Convert seconds to a short string. e.g. 90 -> '1m 30s', 45 -> '45s'."""
    if not seconds or seconds <= 0:
        return "--"
    m, s = divmod(int(seconds), 60)
    if m and s:
        return f"{m}m {s}s"
    if m:
        return f"{m}m"
    return f"{s}s"


def format_volume(exercise: ExerciseTemplate) -> str:
    """Describe an exercise's volume. e.g. '4 x 10', '3 x 45s', '25m'."""
    if exercise.reps is not None:
        return f"{exercise.sets or 1} x {exercise.reps}"
    if exercise.duration_s is not None:
        if exercise.sets and exercise.sets > 1:
            return f"{exercise.sets} x {format_seconds(exercise.duration_s)}"
        return format_seconds(exercise.duration_s)
    return "--"


def title_label(member) -> str:
    """Enum member to display text. e.g. Goal.MUSCLE_GROWTH -> 'Muscle Growth'."""
    return label(member).replace("_", " ").title()


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

FOCUS_COLORS: dict[SessionFocus, str] = {
    SessionFocus.STRENGTH: "#F5B041",   # amber
    SessionFocus.CARDIO: "#82E0AA",     # green
}
REST_COLOR = "#D5DBDB"

MEAL_LABELS: dict[MealType, str] = {
    MealType.BREAKFAST: "Breakfast",
    MealType.LUNCH: "Lunch",
    MealType.DINNER: "Dinner",
    MealType.SNACK: "Snack",
}

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

GOAL_OPTIONS = ("muscle_growth", "fat_loss")
LEVEL_OPTIONS = ("beginner", "intermediate", "advanced")


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def training_table(week: WeeklyWorkoutPlan) -> pd.DataFrame:
    """One row per day: focus, workout name, exercise count and estimated kcal."""
    rows = []
    for entry in week.days:
        if isinstance(entry, TrainingDay):
            rows.append({
                "Day": DAY_NAMES[entry.day],
                "Focus": title_label(entry.focus),
                "Workout": entry.workout_name or "",
                "Exercises": len(entry.exercises),
                "Est. kcal": entry.estimated_calories,
            })
        else:
            rows.append({
                "Day": DAY_NAMES[entry.day],
                "Focus": "Rest",
                "Workout": "",
                "Exercises": 0,
                "Est. kcal": 0,
            })
    return pd.DataFrame(rows, columns=["Day", "Focus", "Workout", "Exercises", "Est. kcal"])


def day_heading(day: TrainingDay) -> str:
    """Expander title like "Tue: Push Day", or the focus when the day has no split."""
    return f"{DAY_NAMES[day.day]}: {day.workout_name or title_label(day.focus)}"


def exercise_table(day: TrainingDay) -> pd.DataFrame:
    """One row per exercise of a training day."""
    return pd.DataFrame(
        [
            {
                "Exercise": e.name,
                "Type": title_label(e.kind),
                "Volume": format_volume(e),
                "Rest": format_seconds(e.rest_time_s),
                "Muscles": ", ".join(e.muscle_groups),
                "Est. kcal": e.estimated_calories,
            }
            for e in day.exercises
        ],
        columns=["Exercise", "Type", "Volume", "Rest", "Muscles", "Est. kcal"],
    )


def macro_table(targets: MacroTargets) -> pd.DataFrame:
    """Daily grams and share of calories per macronutrient, indexed by name."""
    return pd.DataFrame(
        {
            "Grams": [targets.protein, targets.carbs, targets.fat],
            "Percent": [
                targets.protein_percentage,
                targets.carbs_percentage,
                targets.fat_percentage,
            ],
        },
        index=["Protein", "Carbs", "Fat"],
    )


def meal_table(meal: MealPlanTemplate) -> pd.DataFrame:
    """One row per suggestion of a meal."""
    return pd.DataFrame(
        [
            {
                "Suggestion": s.name,
                "kcal": s.calories,
                "Protein (g)": s.macros.protein,
                "Carbs (g)": s.macros.carbs,
                "Fat (g)": s.macros.fat,
                "Prep (min)": s.prep_time_min,
                "Difficulty": title_label(s.difficulty),
            }
            for s in meal.suggestions
        ],
        columns=[
            "Suggestion", "kcal", "Protein (g)", "Carbs (g)", "Fat (g)",
            "Prep (min)", "Difficulty",
        ],
    )


# ---------------------------------------------------------------------------
# Profile construction
# ---------------------------------------------------------------------------


def split_labels(text: str) -> list[str]:
    """Split a comma-separated text field into trimmed, non-empty labels."""
    return [part.strip() for part in text.split(",") if part.strip()]


def build_fitness_user(profile: dict) -> FitnessUser:
    """Build a FitnessUser from a sidebar/profile dict (onboarding keys).

    Injury and restriction fields may be lists or comma-separated strings.
    """
    data = dict(profile)
    for key in ("pastInjuries", "dietaryRestrictions"):
        if isinstance(data.get(key), str):
            data[key] = split_labels(data[key])
    return profile_from_dict(data)


# ---------------------------------------------------------------------------
# Profile persistence
# ---------------------------------------------------------------------------

# The CLI default profile path points here too
PROFILES_DIR = Path(__file__).parent / "profiles"


def _ensure_profiles_dir(directory: Path | None = None) -> Path:
    d = directory or PROFILES_DIR
    d.mkdir(parents=True, exist_ok=True)
    return d


def save_profile(name: str, profile: dict, directory: Path | None = None) -> Path:
    """Save a profile dict as JSON. Returns the file path."""
    d = _ensure_profiles_dir(directory)
    # Sanitise filename
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name).strip()
    if not safe:
        safe = "profile"
    path = d / f"{safe}.json"
    with open(path, "w") as f:
        json.dump(profile, f, indent=2)
    return path


def load_profile(name: str, directory: Path | None = None) -> dict:
    """Load a profile dict from JSON."""
    path = (directory or PROFILES_DIR) / f"{name}.json"
    with open(path) as f:
        return json.load(f)


def list_profiles(directory: Path | None = None) -> list[str]:
    """List available profile names (without .json extension)."""
    d = _ensure_profiles_dir(directory)
    return sorted(p.stem for p in d.glob("*.json"))
