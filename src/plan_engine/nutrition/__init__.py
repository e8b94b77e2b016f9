"""Nutrition side of the plan: macros, meals, hydration and supplements."""

from plan_engine.nutrition.calculator import calculate_hydration, calculate_macros
from plan_engine.nutrition.meals import build_meal_plan
from plan_engine.nutrition.supplements import recommend_supplements

__all__ = [
    "build_meal_plan",
    "calculate_hydration",
    "calculate_macros",
    "recommend_supplements",
]
