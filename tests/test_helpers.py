"""Tests for the Streamlit helper functions."""

import pytest

from helpers import (
    build_fitness_user,
    day_heading,
    exercise_table,
    format_seconds,
    format_volume,
    list_profiles,
    load_profile,
    macro_table,
    meal_table,
    save_profile,
    split_labels,
    title_label,
    training_table,
)
from plan_engine import generate_plan
from plan_engine.models.enums import ExerciseKind, Goal
from plan_engine.models.exercise import ExerciseTemplate


@pytest.fixture
def plan(example_user):
    return generate_plan(example_user)


class TestFormatting:
    @pytest.mark.parametrize(
        "seconds,expected",
        [(None, "--"), (0, "--"), (45, "45s"), (60, "1m"), (90, "1m 30s"), (1800, "30m")],
    )
    def test_format_seconds(self, seconds, expected: str) -> None:
        assert format_seconds(seconds) == expected

    def test_volume_reps(self) -> None:
        e = ExerciseTemplate(name="Rows", kind=ExerciseKind.STRENGTH, sets=4, reps=10, rest_time_s=90)
        assert format_volume(e) == "4 x 10"

    def test_volume_timed_sets(self) -> None:
        e = ExerciseTemplate(name="Plank", kind=ExerciseKind.STRENGTH, sets=3, duration_s=45, rest_time_s=60)
        assert format_volume(e) == "3 x 45s"

    def test_volume_continuous(self) -> None:
        e = ExerciseTemplate(name="Jog", kind=ExerciseKind.CARDIO, duration_s=1500, rest_time_s=0)
        assert format_volume(e) == "25m"

    def test_title_label(self) -> None:
        assert title_label(Goal.MUSCLE_GROWTH) == "Muscle Growth"


class TestTables:
    def test_training_table(self, plan) -> None:
        df = training_table(plan.training_regimen)
        assert list(df["Day"]) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert (df["Focus"] == "Rest").sum() == 3
        assert df["Est. kcal"].sum() == plan.training_regimen.estimated_calories_burned
        assert list(df["Workout"]) == ["", "Push Day", "", "Pull Day", "", "Leg Day", ""]

    def test_exercise_table(self, plan) -> None:
        day = plan.training_regimen.training_days[3]
        df = exercise_table(day)
        assert len(df) == len(day.exercises)
        assert df.iloc[0]["Exercise"] == "Goblet Squats"

    def test_day_heading(self, plan) -> None:
        cardio, push = plan.training_regimen.training_days[:2]
        assert day_heading(cardio) == "Mon: Cardio"
        assert day_heading(push) == "Tue: Push Day"

    def test_macro_table(self, plan) -> None:
        df = macro_table(plan.nutrition_regimen.macro_targets)
        assert df["Percent"].sum() == 100
        assert df.loc["Protein", "Grams"] == 150

    def test_meal_table(self, plan) -> None:
        meal = plan.nutrition_regimen.meal_plan[0]
        assert len(meal_table(meal)) == len(meal.suggestions)


class TestProfileHelpers:
    def test_split_labels(self) -> None:
        assert split_labels(" knee, , lower back ") == ["knee", "lower back"]

    def test_build_fitness_user_from_text_fields(self) -> None:
        user = build_fitness_user({
            "goal": "fat_loss",
            "fitnessLevel": "beginner",
            "trainDaysPerWeek": 2,
            "cardioDaysPerWeek": 2,
            "dailyCalories": 1800,
            "pastInjuries": "knee, wrist",
            "dietaryRestrictions": "vegan",
        })
        assert user.past_injuries == ("knee", "wrist")
        assert user.dietary_restrictions == ("vegan",)

    def test_save_load_list(self, tmp_path) -> None:
        profile = {"goal": "fat_loss", "dailyCalories": 1800}
        path = save_profile("my profile!", profile, directory=tmp_path)
        assert path.name == "my profile.json"
        assert list_profiles(directory=tmp_path) == ["my profile"]
        assert load_profile("my profile", directory=tmp_path) == profile
