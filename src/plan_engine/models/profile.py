"""Frozen fitness profile — the sole input to plan generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import DAYS_PER_WEEK, ExperienceLevel, Goal


@dataclass(frozen=True)
class FitnessUser:
    """Immutable snapshot of a user's onboarding answers.

    ``goal`` and ``fitness_level`` may arrive as raw labels (e.g.
    ``"muscle_growth"``); ``validate_profile`` returns a copy with both
    resolved to enum members.
    """

    goal: Goal | str
    fitness_level: ExperienceLevel | str
    train_days_per_week: int
    cardio_days_per_week: int
    daily_calories: float
    can_do_more: bool = False
    past_injuries: tuple[str, ...] = field(default_factory=tuple)
    dietary_restrictions: tuple[str, ...] = field(default_factory=tuple)
    additional_health_notes: str | None = None

    name: str = ""
    weight_kg: float | None = None

    @property
    def workout_days(self) -> int:
        """Training days per week, clamped to the length of a week."""
        return min(self.train_days_per_week + self.cardio_days_per_week, DAYS_PER_WEEK)
