"""Tests for the weekly plan and exercise models."""

import dataclasses

import pytest

from plan_engine.models.enums import ExerciseKind, SessionFocus, Weekday
from plan_engine.models.exercise import ExerciseTemplate
from plan_engine.models.weekly_plan import RestDay, TrainingDay, WeeklyWorkoutPlan


def _exercise(calories: int = 50) -> ExerciseTemplate:
    return ExerciseTemplate(
        name="Push-ups", kind=ExerciseKind.STRENGTH, sets=3, reps=8,
        rest_time_s=90, estimated_calories=calories,
    )


class TestDayVariants:
    def test_rest_day(self) -> None:
        assert RestDay(day=Weekday.SUNDAY).is_rest

    def test_training_day(self) -> None:
        day = TrainingDay(
            day=Weekday.MONDAY, focus=SessionFocus.STRENGTH,
            exercises=(_exercise(40), _exercise(25)),
        )
        assert not day.is_rest
        assert day.estimated_calories == 65

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            RestDay(day=Weekday.MONDAY).day = Weekday.TUESDAY


class TestWeeklyWorkoutPlan:
    def test_counts(self) -> None:
        days = [RestDay(day=d) for d in Weekday]
        days[2] = TrainingDay(day=Weekday.WEDNESDAY, focus=SessionFocus.CARDIO, exercises=(_exercise(),))
        week = WeeklyWorkoutPlan(days=tuple(days))
        assert week.training_day_count == 1
        assert week.rest_day_count == 6
        assert week.training_days[0].day is Weekday.WEDNESDAY
        assert week.estimated_calories_burned == 50


class TestExerciseWorkSeconds:
    def test_reps(self) -> None:
        assert _exercise().work_seconds == 3 * 8 * 3

    def test_timed_sets(self) -> None:
        plank = ExerciseTemplate(
            name="Plank", kind=ExerciseKind.STRENGTH, sets=3, duration_s=45, rest_time_s=60,
        )
        assert plank.work_seconds == 135

    def test_continuous(self) -> None:
        jog = ExerciseTemplate(name="Jog", kind=ExerciseKind.CARDIO, duration_s=1200, rest_time_s=0)
        assert jog.work_seconds == 1200
