"""Exercise selection for a single training day.

Picks the main-set exercises from the rule tables, removes anything that
loads an injured muscle or joint, falls back to a generic low-impact
alternative when nothing is left, appends a cooldown stretch, and applies
the "can do more" volume boost.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field

from plan_engine.exceptions import ConstraintUnsatisfiable
from plan_engine.models.enums import (
    KCAL_PER_MIN_BY_KIND,
    LEVEL_BURN_MULTIPLIER,
    MIN_MATCH_WORD_LEN,
    VOLUME_BOOST_DURATION_FACTOR,
    VOLUME_BOOST_EXTRA_SETS,
    ExperienceLevel,
    SessionFocus,
)
from plan_engine.models.exercise import ExerciseTemplate, WorkoutSplit
from plan_engine.models.profile import FitnessUser
from plan_engine.training.catalog import (
    FALLBACK_TABLE,
    FLEXIBILITY_TABLE,
    candidates_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySelection:
    """Exercises chosen for one day plus notes on what was excluded and why."""

    exercises: tuple[ExerciseTemplate, ...]
    notes: tuple[str, ...] = field(default_factory=tuple)
    workout_name: str | None = None


def _words(text: str) -> list[str]:
    """Lower-case alphabetic words of at least ``MIN_MATCH_WORD_LEN`` letters."""
    return [w for w in re.findall(r"[a-z]+", text.lower()) if len(w) >= MIN_MATCH_WORD_LEN]


def _word_hits(tag_word: str, label_word: str) -> bool:
    return label_word.startswith(tag_word) or tag_word.startswith(label_word)


def injury_matches(tag: str, injury_label: str) -> bool:
    """True if a muscle-group tag is hit by an injury label.

    Case-insensitive and word-level. A tag is hit when its head word (the
    last word, so ``back`` for "lower back") and some word of the label are
    prefixes of one another. Singular and plural forms meet in either
    direction: "bad knees" hits ``knee`` and "Hamstring strain" hits
    ``hamstrings``; "Back injury" hits ``lower back``.
    """
    tag_words = _words(tag)
    if not tag_words:
        return False
    head = tag_words[-1]
    return any(_word_hits(head, w) for w in _words(injury_label))


def matching_injury(
    exercise: ExerciseTemplate, injuries: tuple[str, ...],
) -> str | None:
    """Return the first injury label that excludes the exercise, if any."""
    for injury in injuries:
        for tag in exercise.muscle_groups:
            if injury_matches(tag, injury):
                return injury
    return None


def boost_volume(exercise: ExerciseTemplate) -> ExerciseTemplate:
    """Raise volume without adding exercises: +1 set, else +20% duration."""
    if exercise.sets is not None:
        return dataclasses.replace(exercise, sets=exercise.sets + VOLUME_BOOST_EXTRA_SETS)
    if exercise.duration_s is not None:
        return dataclasses.replace(
            exercise,
            duration_s=round(exercise.duration_s * VOLUME_BOOST_DURATION_FACTOR),
        )
    return exercise


def estimate_calories(exercise: ExerciseTemplate, level: ExperienceLevel) -> int:
    """Estimate kcal burned: active minutes x kind rate x level multiplier."""
    rests = max((exercise.sets or 1) - 1, 0) * exercise.rest_time_s
    minutes = (exercise.work_seconds + rests) / 60.0
    rate = KCAL_PER_MIN_BY_KIND[exercise.kind]
    return round(minutes * rate * LEVEL_BURN_MULTIPLIER[level])


def _filter_injuries(
    exercises: tuple[ExerciseTemplate, ...],
    injuries: tuple[str, ...],
    notes: list[str],
) -> list[ExerciseTemplate]:
    kept: list[ExerciseTemplate] = []
    for exercise in exercises:
        injury = matching_injury(exercise, injuries)
        if injury is None:
            kept.append(exercise)
        else:
            logger.debug("Excluded %s (injury: %s)", exercise.name, injury)
            notes.append(f"Excluded {exercise.name} due to injury: {injury}")
    return kept


def select_exercises(
    focus: SessionFocus,
    profile: FitnessUser,
    candidates: tuple[ExerciseTemplate, ...] | None = None,
    fallbacks: tuple[ExerciseTemplate, ...] | None = None,
    stretches: tuple[ExerciseTemplate, ...] | None = None,
    split: WorkoutSplit | None = None,
) -> DaySelection:
    """Choose the exercises for one training day.

    Algorithm:
    1. Look up main-set candidates for (focus, level, goal), narrowed to
       the strength split when one is given
    2. Drop candidates whose muscle-group tags match an injury
    3. If none remain, use the first non-excluded fallback for the focus
    4. Append the first non-excluded cooldown stretch for the level
    5. Apply the volume boost if ``can_do_more``
    6. Attach calorie estimates

    Args:
        focus: Strength or cardio emphasis of the day.
        profile: Validated profile (enum goal and level).
        candidates: Override for the main-set table lookup.
        fallbacks: Override for the generic fallback list.
        stretches: Override for the cooldown stretch list.
        split: Strength split for the day; its name is carried on the result.

    Returns:
        A DaySelection with a non-empty exercise tuple.

    Raises:
        ConstraintUnsatisfiable: If injuries exclude every candidate and
            every fallback.
    """
    level = profile.fitness_level
    injuries = tuple(profile.past_injuries)
    if candidates is None:
        candidates = candidates_for(focus, level, profile.goal, split)
    if fallbacks is None:
        fallbacks = FALLBACK_TABLE[focus]
    if stretches is None:
        stretches = FLEXIBILITY_TABLE[level]

    session = split.name if split is not None else focus.name.lower()
    notes: list[str] = []
    chosen = _filter_injuries(candidates, injuries, notes)

    if not chosen:
        usable = [f for f in fallbacks if matching_injury(f, injuries) is None]
        if not usable:
            raise ConstraintUnsatisfiable(
                f"No {focus.name.lower()} exercise is compatible with injuries: "
                f"{', '.join(injuries)}"
            )
        chosen = [usable[0]]
        logger.info(
            "All %s candidates excluded; falling back to %s",
            session, usable[0].name,
        )
        notes.append(f"Using low-impact alternative: {usable[0].name}")

    cooldown = next(
        (s for s in stretches if matching_injury(s, injuries) is None), None,
    )
    if cooldown is not None:
        chosen.append(cooldown)

    if profile.can_do_more:
        chosen = [boost_volume(e) for e in chosen]

    exercises = tuple(
        dataclasses.replace(e, estimated_calories=estimate_calories(e, level))
        for e in chosen
    )
    return DaySelection(
        exercises=exercises,
        notes=tuple(notes),
        workout_name=split.name if split is not None else None,
    )
