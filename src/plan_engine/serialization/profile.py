"""Build a FitnessUser from an onboarding payload (camelCase dict)."""

from __future__ import annotations

from plan_engine.models.profile import FitnessUser


def _labels(value) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value if str(v).strip())


def profile_from_dict(data: dict) -> FitnessUser:
    """Convert an onboarding payload into a FitnessUser.

    Field values are passed through unchecked; ``validate_profile`` does
    all range and membership checks. Missing day counts default to 0 and
    ``canDoMore`` to False. ``preferences.dietaryRestrictions`` is merged
    into the top-level restriction list.
    """
    restrictions = list(_labels(data.get("dietaryRestrictions")))
    for extra in _labels((data.get("preferences") or {}).get("dietaryRestrictions")):
        if extra not in restrictions:
            restrictions.append(extra)

    weight = data.get("weight", data.get("weightKg"))

    return FitnessUser(
        goal=data.get("goal", ""),
        fitness_level=data.get("fitnessLevel", ""),
        train_days_per_week=data.get("trainDaysPerWeek", 0),
        cardio_days_per_week=data.get("cardioDaysPerWeek", 0),
        daily_calories=data.get("dailyCalories", 0),
        can_do_more=bool(data.get("canDoMore", False)),
        past_injuries=_labels(data.get("pastInjuries")),
        dietary_restrictions=tuple(restrictions),
        additional_health_notes=data.get("additionalHealthNotes") or None,
        name=data.get("name", "") or "",
        weight_kg=weight if weight else None,
    )
