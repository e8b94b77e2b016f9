"""Supplement recommendations keyed by goal."""

from __future__ import annotations

from plan_engine.models.enums import BASELINE_SUPPLEMENTS, Goal
from plan_engine.nutrition.meal_catalog import (
    PLANT_BASED_DIETS,
    PLANT_PROTEIN_RESTRICTIONS,
    normalise_restriction,
)

GOAL_SUPPLEMENTS: dict[Goal, tuple[str, ...]] = {
    Goal.MUSCLE_GROWTH: ("Creatine", "Whey protein", "BCAAs"),
    Goal.FAT_LOSS: ("Green tea extract", "L-Carnitine"),
}

PLANT_PROTEIN = "Plant protein"

# Animal-derived products and their plant-based replacement
_PLANT_SUBSTITUTES = {"Whey protein": PLANT_PROTEIN}


def recommend_supplements(
    goal: Goal, restrictions: tuple[str, ...] | list[str] = (),
) -> tuple[str, ...]:
    """Baseline supplements followed by the goal-specific additions.

    Whey protein becomes plant protein for vegan, vegetarian, dairy-free
    and lactose-intolerant users. Vegan and vegetarian users get plant
    protein on every goal. Order is stable and duplicates are dropped.
    """
    normalised = {normalise_restriction(r) for r in restrictions}
    plant_substitutes = bool(normalised & PLANT_PROTEIN_RESTRICTIONS)

    items = BASELINE_SUPPLEMENTS + GOAL_SUPPLEMENTS[goal]
    if normalised & PLANT_BASED_DIETS:
        items += (PLANT_PROTEIN,)

    result: list[str] = []
    for item in items:
        if plant_substitutes:
            item = _PLANT_SUBSTITUTES.get(item, item)
        if item not in result:
            result.append(item)
    return tuple(result)
