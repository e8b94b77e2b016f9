"""Meal plan builder — splits daily targets across the four meal slots."""

from __future__ import annotations

import logging

from plan_engine.exceptions import ConstraintUnsatisfiable
from plan_engine.models.enums import (
    MAX_SUGGESTIONS_PER_MEAL,
    MEAL_PROPORTIONS,
    MIN_SUGGESTIONS_PER_MEAL,
    MealType,
)
from plan_engine.models.nutrition import MacroGrams, MealPlanTemplate, MealSuggestion
from plan_engine.nutrition.meal_catalog import (
    MEAL_CATALOG,
    RESTRICTION_EXCLUSIONS,
    SAFE_SUGGESTIONS,
    normalise_restriction,
)

logger = logging.getLogger(__name__)


def excluded_tags(restrictions: tuple[str, ...] | list[str]) -> frozenset[str]:
    """Union of ingredient tags excluded by the given restriction labels.

    Unknown labels cannot be enforced; they are logged and skipped.
    """
    tags: set[str] = set()
    for restriction in restrictions:
        key = normalise_restriction(restriction)
        if key in RESTRICTION_EXCLUSIONS:
            tags |= RESTRICTION_EXCLUSIONS[key]
        elif key:
            logger.warning("Unknown dietary restriction %r ignored", restriction)
    return frozenset(tags)


def filter_suggestions(
    meal_type: MealType,
    excluded: frozenset[str],
    catalog: dict[MealType, tuple[MealSuggestion, ...]] | None = None,
    safe: dict[MealType, MealSuggestion] | None = None,
) -> tuple[MealSuggestion, ...]:
    """Pick up to three suggestions for a meal slot, in catalog order.

    When fewer than two survive the restriction filter, the slot's safe
    suggestion is appended.

    Raises:
        ConstraintUnsatisfiable: If no suggestion at all survives.
    """
    catalog = MEAL_CATALOG if catalog is None else catalog
    safe = SAFE_SUGGESTIONS if safe is None else safe

    allowed = [s for s in catalog.get(meal_type, ()) if not (s.tags & excluded)]
    chosen = allowed[:MAX_SUGGESTIONS_PER_MEAL]

    if len(chosen) < MIN_SUGGESTIONS_PER_MEAL:
        fallback = safe.get(meal_type)
        if fallback is not None and not (fallback.tags & excluded) and fallback not in chosen:
            logger.debug("Adding safe %s suggestion %s", meal_type.name.lower(), fallback.name)
            chosen.append(fallback)

    if not chosen:
        raise ConstraintUnsatisfiable(
            f"No {meal_type.name.lower()} suggestion satisfies excluded tags: "
            f"{', '.join(sorted(excluded))}"
        )
    return tuple(chosen)


def build_meal_plan(
    daily_calories: float,
    macros: MacroGrams,
    restrictions: tuple[str, ...] | list[str] = (),
    catalog: dict[MealType, tuple[MealSuggestion, ...]] | None = None,
    safe: dict[MealType, MealSuggestion] | None = None,
) -> tuple[MealPlanTemplate, ...]:
    """Build one MealPlanTemplate per meal type, in canonical order.

    Calories and each macro are split by MEAL_PROPORTIONS
    (breakfast 25%, lunch 30%, dinner 30%, snack 15%).

    Args:
        daily_calories: Daily calorie target.
        macros: Daily macro grams.
        restrictions: Dietary restriction labels from the profile.
        catalog: Override for the suggestion catalog.
        safe: Override for the per-meal safe suggestions.

    Returns:
        Four MealPlanTemplates: breakfast, lunch, dinner, snack.
    """
    excluded = excluded_tags(restrictions)

    plan: list[MealPlanTemplate] = []
    for meal_type in MealType:
        share = MEAL_PROPORTIONS[meal_type]
        plan.append(MealPlanTemplate(
            meal_type=meal_type,
            target_calories=round(daily_calories * share),
            target_macros=MacroGrams(
                protein=round(macros.protein * share),
                carbs=round(macros.carbs * share),
                fat=round(macros.fat * share),
            ),
            suggestions=filter_suggestions(meal_type, excluded, catalog, safe),
        ))
    return tuple(plan)
