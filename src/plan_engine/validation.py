"""Profile validation — fail fast before any generation work starts."""

from __future__ import annotations

import dataclasses
import logging
import math
from enum import IntEnum
from typing import TypeVar

from plan_engine.exceptions import ValidationError
from plan_engine.models.enums import DAYS_PER_WEEK, ExperienceLevel, Goal
from plan_engine.models.profile import FitnessUser

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=IntEnum)


def parse_enum(enum_cls: type[E], value: object, field_name: str) -> E:
    """Resolve an enum member from a member or a label like ``"fat_loss"``.

    Labels are matched by member name, case-insensitive, with ``-`` and
    spaces treated as ``_``.

    Raises:
        ValidationError: If the value names no member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in enum_cls.__members__:
            return enum_cls[key]
    allowed = ", ".join(m.name.lower() for m in enum_cls)
    raise ValidationError(field_name, f"{value!r} is not one of: {allowed}")


def _require_count(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field_name, f"must be a whole number, got {value!r}")
    if value < 0:
        raise ValidationError(field_name, f"must be >= 0, got {value}")
    return value


def _require_positive(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(field_name, f"must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(field_name, f"must be > 0, got {value}")
    return value


def _require_labels(value: object, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ValidationError(
            field_name, f"must be a list of labels, got {type(value).__name__}",
        )
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(field_name, f"labels must be text, got {item!r}")
    return tuple(value)


def validate_profile(profile: FitnessUser) -> FitnessUser:
    """Check a profile for completeness and numeric sanity.

    Checks run in a fixed order and the first violation raises; no partial
    result is ever returned.

    Args:
        profile: The raw onboarding profile.

    Returns:
        A copy of the profile with ``goal`` and ``fitness_level`` resolved to
        enum members and label lists coerced to tuples.

    Raises:
        ValidationError: Naming the first offending field.
    """
    goal = parse_enum(Goal, profile.goal, "goal")
    level = parse_enum(ExperienceLevel, profile.fitness_level, "fitnessLevel")
    _require_positive(profile.daily_calories, "dailyCalories")
    train = _require_count(profile.train_days_per_week, "trainDaysPerWeek")
    cardio = _require_count(profile.cardio_days_per_week, "cardioDaysPerWeek")
    if train + cardio > DAYS_PER_WEEK:
        raise ValidationError(
            "trainDaysPerWeek+cardioDaysPerWeek",
            f"{train} + {cardio} exceeds {DAYS_PER_WEEK} days per week",
        )
    if profile.weight_kg is not None:
        _require_positive(profile.weight_kg, "weight")
    injuries = _require_labels(profile.past_injuries, "pastInjuries")
    restrictions = _require_labels(profile.dietary_restrictions, "dietaryRestrictions")

    normalised = dataclasses.replace(
        profile,
        goal=goal,
        fitness_level=level,
        past_injuries=injuries,
        dietary_restrictions=restrictions,
    )
    logger.debug(
        "Validated profile: goal=%s level=%s days=%d+%d",
        goal.name, level.name, train, cardio,
    )
    return normalised
