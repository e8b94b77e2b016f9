"""Shared test fixtures: sample fitness profiles and a profile factory."""

from __future__ import annotations

from typing import Callable

import pytest

from plan_engine.models.enums import ExperienceLevel, Goal
from plan_engine.models.profile import FitnessUser


@pytest.fixture
def example_user() -> FitnessUser:
    """Intermediate muscle-growth user: 3 strength + 1 cardio, shoulder injury, vegetarian."""
    return FitnessUser(
        goal="muscle_growth",
        fitness_level="intermediate",
        train_days_per_week=3,
        cardio_days_per_week=1,
        can_do_more=True,
        daily_calories=2000,
        past_injuries=("Shoulder injury",),
        dietary_restrictions=("Vegetarian",),
        additional_health_notes=None,
    )


@pytest.fixture
def beginner_fat_loss_user() -> FitnessUser:
    """Beginner fat-loss user: 2 strength + 2 cardio, bad knees, no restrictions."""
    return FitnessUser(
        goal=Goal.FAT_LOSS,
        fitness_level=ExperienceLevel.BEGINNER,
        train_days_per_week=2,
        cardio_days_per_week=2,
        daily_calories=1800,
        past_injuries=("bad knees",),
        name="Dana",
        weight_kg=100.0,
    )


@pytest.fixture
def user_factory() -> Callable[..., FitnessUser]:
    """Factory fixture for FitnessUser instances.

    Usage:
        user = user_factory(goal="fat_loss", train_days_per_week=5)
    """

    def factory(**overrides) -> FitnessUser:
        defaults = dict(
            goal=Goal.MUSCLE_GROWTH,
            fitness_level=ExperienceLevel.INTERMEDIATE,
            train_days_per_week=3,
            cardio_days_per_week=1,
            daily_calories=2200,
        )
        defaults.update(overrides)
        return FitnessUser(**defaults)

    return factory
