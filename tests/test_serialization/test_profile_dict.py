"""Tests for building a FitnessUser from an onboarding payload."""

from plan_engine.models.enums import Goal
from plan_engine.serialization import profile_from_dict
from plan_engine.validation import validate_profile


def _payload(**overrides) -> dict:
    data = {
        "goal": "muscle_growth",
        "fitnessLevel": "intermediate",
        "trainDaysPerWeek": 3,
        "cardioDaysPerWeek": 1,
        "canDoMore": True,
        "dailyCalories": 2000,
        "pastInjuries": ["Shoulder injury"],
        "dietaryRestrictions": ["Vegetarian"],
        "additionalHealthNotes": None,
    }
    data.update(overrides)
    return data


class TestProfileFromDict:
    def test_maps_camel_case_keys(self) -> None:
        user = profile_from_dict(_payload(name="Sam", weight=72))
        assert user.train_days_per_week == 3
        assert user.cardio_days_per_week == 1
        assert user.can_do_more is True
        assert user.past_injuries == ("Shoulder injury",)
        assert user.dietary_restrictions == ("Vegetarian",)
        assert user.name == "Sam"
        assert user.weight_kg == 72

    def test_validates_cleanly(self) -> None:
        assert validate_profile(profile_from_dict(_payload())).goal is Goal.MUSCLE_GROWTH

    def test_defaults(self) -> None:
        user = profile_from_dict({"goal": "fat_loss", "fitnessLevel": "beginner", "dailyCalories": 1500})
        assert user.train_days_per_week == 0
        assert user.can_do_more is False
        assert user.past_injuries == ()
        assert user.weight_kg is None

    def test_single_string_label(self) -> None:
        assert profile_from_dict(_payload(pastInjuries="knee")).past_injuries == ("knee",)

    def test_preferences_restrictions_merged(self) -> None:
        user = profile_from_dict(_payload(
            preferences={"dietaryRestrictions": ["gluten-free", "Vegetarian"]},
        ))
        assert user.dietary_restrictions == ("Vegetarian", "gluten-free")

    def test_blank_notes_become_none(self) -> None:
        assert profile_from_dict(_payload(additionalHealthNotes="")).additional_health_notes is None
