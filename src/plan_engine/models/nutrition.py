"""Nutrition models: macro targets, meal templates and the daily regimen."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import Difficulty, MealType


@dataclass(frozen=True)
class MacroGrams:
    """Protein / carbs / fat in whole grams."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class MacroTargets:
    """Daily macro grams plus the policy percentages they were derived from.

    Percentages come straight from the goal table, so they always sum to
    100 regardless of gram rounding.
    """

    protein: int
    carbs: int
    fat: int
    protein_percentage: int
    carbs_percentage: int
    fat_percentage: int

    @property
    def grams(self) -> MacroGrams:
        return MacroGrams(protein=self.protein, carbs=self.carbs, fat=self.fat)

    @property
    def percentage_total(self) -> int:
        return self.protein_percentage + self.carbs_percentage + self.fat_percentage


@dataclass(frozen=True)
class MealSuggestion:
    """A concrete meal idea. ``tags`` are ingredient categories (meat, dairy, ...)."""

    name: str
    ingredients: tuple[str, ...]
    calories: int
    macros: MacroGrams
    prep_time_min: int
    difficulty: Difficulty
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class MealPlanTemplate:
    """Calorie and macro targets for one meal slot, with suggestions."""

    meal_type: MealType
    target_calories: int
    target_macros: MacroGrams
    suggestions: tuple[MealSuggestion, ...]


@dataclass(frozen=True)
class NutritionRegimen:
    daily_calorie_target: float
    macro_targets: MacroTargets
    meal_plan: tuple[MealPlanTemplate, ...]
    hydration_target_l: float
    supplements: tuple[str, ...]
