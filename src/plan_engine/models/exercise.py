"""Exercise template — one prescribed exercise within a training day."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import SECONDS_PER_REP, ExerciseKind, ExperienceLevel


@dataclass(frozen=True)
class ExerciseTemplate:
    """A single exercise with its volume targets and coaching notes.

    Strength work uses ``sets``/``reps`` (or ``sets``/``duration_s`` for
    holds); cardio uses ``duration_s``. ``muscle_groups`` holds the
    muscle/joint tags checked against the user's injuries.
    """

    name: str
    kind: ExerciseKind
    rest_time_s: int
    instructions: tuple[str, ...] = field(default_factory=tuple)
    sets: int | None = None
    reps: int | None = None
    duration_s: int | None = None
    muscle_groups: tuple[str, ...] = field(default_factory=tuple)
    beginner_modification: str | None = None
    advanced_modification: str | None = None
    estimated_calories: int = 0

    @property
    def work_seconds(self) -> int:
        """Approximate time under work, excluding rest."""
        sets = self.sets or 1
        if self.duration_s is not None:
            return sets * self.duration_s
        if self.reps is not None:
            return sets * self.reps * SECONDS_PER_REP
        return 0


@dataclass(frozen=True)
class WorkoutSplit:
    """A named strength session that rotates through the week.

    ``exercise_names`` picks, per experience level, which entries of the
    level/goal strength pool the session uses, in order.
    """

    name: str
    target_muscle_groups: tuple[str, ...]
    exercise_names: dict[ExperienceLevel, tuple[str, ...]]
