"""Daily calorie, macro and hydration targets.

The profile's ``daily_calories`` is authoritative; no basal metabolic
estimate is recomputed here. Macro percentages come from a goal-keyed
policy table and are stored as-is, so their sum is exactly 100 whatever
the gram rounding does.
"""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.models.enums import (
    DEFAULT_WEIGHT_KG,
    HYDRATION_ML_PER_KG,
    KCAL_PER_GRAM_CARBS,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
    MIN_HYDRATION_L,
    Goal,
)
from plan_engine.models.nutrition import MacroTargets


@dataclass(frozen=True)
class MacroSplit:
    """Integer protein / carbs / fat percentages summing to 100."""

    protein: int
    carbs: int
    fat: int


MACRO_SPLITS: dict[Goal, MacroSplit] = {
    Goal.MUSCLE_GROWTH: MacroSplit(protein=30, carbs=45, fat=25),
    Goal.FAT_LOSS: MacroSplit(protein=35, carbs=35, fat=30),
}


def grams_for(percentage: int, calories: float, kcal_per_gram: int) -> int:
    """Whole grams of a macro supplying ``percentage`` of ``calories``."""
    return round(percentage * calories / (100 * kcal_per_gram))


def calculate_macros(daily_calories: float, goal: Goal) -> MacroTargets:
    """Derive macro grams and percentages for a calorie target.

    Args:
        daily_calories: Daily calorie target (kcal), > 0.
        goal: The user's goal; selects the split from MACRO_SPLITS.

    Returns:
        MacroTargets with grams rounded to the nearest gram.
    """
    split = MACRO_SPLITS[goal]
    return MacroTargets(
        protein=grams_for(split.protein, daily_calories, KCAL_PER_GRAM_PROTEIN),
        carbs=grams_for(split.carbs, daily_calories, KCAL_PER_GRAM_CARBS),
        fat=grams_for(split.fat, daily_calories, KCAL_PER_GRAM_FAT),
        protein_percentage=split.protein,
        carbs_percentage=split.carbs,
        fat_percentage=split.fat,
    )


def calculate_hydration(weight_kg: float | None) -> float:
    """Daily water target in litres: 35 ml/kg, at least 2.0 L."""
    weight = weight_kg if weight_kg is not None else DEFAULT_WEIGHT_KG
    return max(MIN_HYDRATION_L, round(weight * HYDRATION_ML_PER_KG / 1000, 1))
