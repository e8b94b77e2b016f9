"""Weekly planning models: rest/training day variants and WeeklyWorkoutPlan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from plan_engine.models.enums import ProgressionPhase, SessionFocus, Weekday
from plan_engine.models.exercise import ExerciseTemplate


@dataclass(frozen=True)
class RestDay:
    """A day with no assigned exercises."""

    day: Weekday

    @property
    def is_rest(self) -> bool:
        return True


@dataclass(frozen=True)
class TrainingDay:
    """A day with a non-empty, ordered list of exercises.

    ``notes`` records injury exclusions and fallbacks applied while
    selecting the exercises. ``workout_name`` names the strength split
    ("Push Day", "Lower Body Strength"); cardio days have none.
    """

    day: Weekday
    focus: SessionFocus
    exercises: tuple[ExerciseTemplate, ...]
    notes: tuple[str, ...] = field(default_factory=tuple)
    workout_name: str | None = None

    @property
    def is_rest(self) -> bool:
        return False

    @property
    def estimated_calories(self) -> int:
        return sum(e.estimated_calories for e in self.exercises)


DayPlan = Union[RestDay, TrainingDay]


@dataclass(frozen=True)
class ProgressionPlan:
    """Where the user sits in the multi-week progression."""

    phase: ProgressionPhase
    duration_weeks: int
    next_phase: ProgressionPhase | None = None


@dataclass(frozen=True)
class WeeklyWorkoutPlan:
    """Seven day entries, Monday through Sunday."""

    days: tuple[DayPlan, ...]
    progression: ProgressionPlan | None = None

    @property
    def training_days(self) -> tuple[TrainingDay, ...]:
        return tuple(d for d in self.days if isinstance(d, TrainingDay))

    @property
    def training_day_count(self) -> int:
        return len(self.training_days)

    @property
    def rest_day_count(self) -> int:
        return sum(1 for d in self.days if isinstance(d, RestDay))

    @property
    def estimated_calories_burned(self) -> int:
        """Weekly calorie burn estimate across all training days."""
        return sum(d.estimated_calories for d in self.training_days)
