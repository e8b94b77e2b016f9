"""Progression phase lookup by experience level."""

from __future__ import annotations

from plan_engine.models.enums import (
    PROGRESSION_PHASE_WEEKS,
    ExperienceLevel,
    ProgressionPhase,
)
from plan_engine.models.weekly_plan import ProgressionPlan

# level -> (current phase, next phase)
_PROGRESSION: dict[ExperienceLevel, tuple[ProgressionPhase, ProgressionPhase | None]] = {
    ExperienceLevel.BEGINNER: (ProgressionPhase.FOUNDATION, ProgressionPhase.DEVELOPMENT),
    ExperienceLevel.INTERMEDIATE: (ProgressionPhase.DEVELOPMENT, ProgressionPhase.ADVANCED),
    ExperienceLevel.ADVANCED: (ProgressionPhase.ADVANCED, None),
}


def progression_for(level: ExperienceLevel) -> ProgressionPlan:
    phase, next_phase = _PROGRESSION[level]
    return ProgressionPlan(
        phase=phase,
        duration_weeks=PROGRESSION_PHASE_WEEKS,
        next_phase=next_phase,
    )
