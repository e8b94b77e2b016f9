"""Tests for plan JSON serialization."""

import json

import pytest

from plan_engine import generate_plan
from plan_engine.serialization import to_plan_dict, to_plan_json_string


@pytest.fixture
def plan_dict(example_user) -> dict:
    return to_plan_dict(generate_plan(example_user))


class TestTrainingRegimen:
    def test_seven_day_entries(self, plan_dict) -> None:
        regimen = plan_dict["trainingRegimen"]
        assert [d["day"] for d in regimen] == [
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        ]

    def test_rest_days_have_null_workout(self, plan_dict) -> None:
        rest = [d for d in plan_dict["trainingRegimen"] if d["workout"] is None]
        assert len(rest) == 3

    def test_exercise_fields(self, plan_dict) -> None:
        saturday = plan_dict["trainingRegimen"][5]
        assert saturday["focus"] == "strength"
        goblet = saturday["workout"][0]
        assert goblet["name"] == "Goblet Squats"
        assert goblet["type"] == "strength"
        assert goblet["numberOfSets"] == 5
        assert goblet["reps"] == 10
        assert goblet["restTime"] == 120
        assert "duration" not in goblet
        assert goblet["muscleGroups"] == ["legs", "knee", "hip"]

    def test_workout_names(self, plan_dict) -> None:
        names = [d.get("workoutName") for d in plan_dict["trainingRegimen"]]
        assert names == [None, "Push Day", None, "Pull Day", None, "Leg Day", None]

    def test_cardio_has_duration(self, plan_dict) -> None:
        jog = plan_dict["trainingRegimen"][0]["workout"][0]
        assert jog["type"] == "cardio"
        assert jog["duration"] == 1800
        assert "numberOfSets" not in jog

    def test_progression(self, plan_dict) -> None:
        assert plan_dict["progression"] == {
            "phase": "development", "durationWeeks": 8, "nextPhase": "advanced",
        }


class TestNutritionRegimen:
    def test_macro_targets(self, plan_dict) -> None:
        macros = plan_dict["nutritionRegimen"]["macroTargets"]
        assert macros["proteinPercentage"] + macros["carbsPercentage"] + macros["fatPercentage"] == 100

    def test_meal_plan_shape(self, plan_dict) -> None:
        meals = plan_dict["nutritionRegimen"]["mealPlan"]
        assert [m["mealType"] for m in meals] == ["breakfast", "lunch", "dinner", "snack"]
        first = meals[0]["suggestions"][0]
        assert set(first) == {"name", "ingredients", "calories", "macros", "prepTime", "difficulty"}

    def test_supplements(self, plan_dict) -> None:
        assert plan_dict["nutritionRegimen"]["supplements"][:2] == ["Multivitamin", "Omega-3"]


class TestHealthNotes:
    def test_absent_notes_are_null(self, plan_dict) -> None:
        assert plan_dict["healthNotes"] is None

    def test_notes_carried_through(self, user_factory) -> None:
        user = user_factory(additional_health_notes="Asthma; keep an inhaler nearby")
        plan_dict = to_plan_dict(generate_plan(user))
        assert plan_dict["healthNotes"] == "Asthma; keep an inhaler nearby"


class TestJsonString:
    def test_parses_back_to_dict(self, example_user) -> None:
        plan = generate_plan(example_user)
        assert json.loads(to_plan_json_string(plan)) == to_plan_dict(plan)

    def test_indent(self, example_user) -> None:
        text = to_plan_json_string(generate_plan(example_user), indent=4)
        assert '\n    "version": 1' in text
