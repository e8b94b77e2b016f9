"""Weekly schedule allocation — which days train, which rest, and their focus.

Training days start from an even-spacing baseline (``floor(i * 7 / n)``,
which gives Mon/Wed/Fri for three days and Mon/Tue/Thu/Sat for four). When
the baseline leaves more than two consecutive days of the same type and some
placement keeps every run to two days, the placement closest to the baseline
among those wins. One or six days can never manage that and keep the
baseline. Remaining ties go to the lowest day indices, so the result
depends on nothing but the two day counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations

import numpy as np

from plan_engine.models.enums import (
    DAYS_PER_WEEK,
    MAX_PREFERRED_RUN_DAYS,
    SessionFocus,
    Weekday,
)


@dataclass(frozen=True)
class SlotAssignment:
    """One day of the week; ``focus`` is None on rest days."""

    day: Weekday
    focus: SessionFocus | None = None

    @property
    def is_rest(self) -> bool:
        return self.focus is None


def even_spacing_baseline(workout_days: int) -> np.ndarray:
    """Evenly spread day indices for ``workout_days`` sessions."""
    if workout_days <= 0:
        return np.zeros(0, dtype=int)
    return np.arange(workout_days) * DAYS_PER_WEEK // workout_days


def longest_run(training_indices: tuple[int, ...]) -> int:
    """Longest stretch of consecutive same-type days (training or rest)."""
    mask = np.zeros(DAYS_PER_WEEK, dtype=int)
    mask[list(training_indices)] = 1
    change_points = np.flatnonzero(np.diff(mask)) + 1
    bounds = np.concatenate(([0], change_points, [DAYS_PER_WEEK]))
    return int(np.diff(bounds).max())


def allocate_training_days(workout_days: int) -> tuple[int, ...]:
    """Pick the day indices (0=Monday) that hold a training session.

    Args:
        workout_days: Number of training days; clamped to 0-7.

    Returns:
        Sorted tuple of ``min(workout_days, 7)`` day indices.
    """
    n = max(0, min(workout_days, DAYS_PER_WEEK))
    if n == 0:
        return ()
    if n == DAYS_PER_WEEK:
        return tuple(range(DAYS_PER_WEEK))

    baseline = even_spacing_baseline(n)
    placements = list(combinations(range(DAYS_PER_WEEK), n))
    # Counts like 1 or 6 cannot avoid a long run; rank those by drift alone
    penalise_runs = any(longest_run(p) <= MAX_PREFERRED_RUN_DAYS for p in placements)

    def score(candidate: tuple[int, ...]) -> tuple[int, int, tuple[int, ...]]:
        run_penalty = (
            max(longest_run(candidate), MAX_PREFERRED_RUN_DAYS) if penalise_runs else 0
        )
        drift = int(np.abs(np.asarray(candidate) - baseline).sum())
        return run_penalty, drift, candidate

    return min(placements, key=score)


def cardio_slot_count(train_days: int, cardio_days: int) -> int:
    """Cardio share of the (clamped) training days, proportional to the request."""
    total = train_days + cardio_days
    if total == 0:
        return 0
    workout_days = min(total, DAYS_PER_WEEK)
    return round(workout_days * cardio_days / total)


def allocate_week(train_days: int, cardio_days: int) -> tuple[SlotAssignment, ...]:
    """Lay out a 7-day week of training and rest slots.

    Cardio slots take the first training days in day order; the remaining
    training days are strength days.

    Args:
        train_days: Requested strength days per week.
        cardio_days: Requested cardio days per week.

    Returns:
        Seven SlotAssignments, Monday through Sunday.
    """
    training = allocate_training_days(train_days + cardio_days)
    cardio_slots = cardio_slot_count(train_days, cardio_days)

    focus_by_day: dict[int, SessionFocus] = {}
    for position, day_index in enumerate(training):
        focus_by_day[day_index] = (
            SessionFocus.CARDIO if position < cardio_slots else SessionFocus.STRENGTH
        )

    return tuple(
        SlotAssignment(day=day, focus=focus_by_day.get(day.value))
        for day in Weekday
    )
