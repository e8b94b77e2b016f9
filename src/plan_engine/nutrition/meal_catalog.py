"""Meal suggestion catalog and dietary restriction rules.

Each suggestion carries ingredient category tags; a restriction excludes
every suggestion whose tags intersect its exclusion set. Each meal type
also has one restriction-agnostic safe suggestion (no tags) used when
filtering leaves too little.
"""

from __future__ import annotations

from plan_engine.models.enums import Difficulty, MealType
from plan_engine.models.nutrition import MacroGrams, MealSuggestion

# Ingredient category tags
MEAT = "meat"
PORK = "pork"
POULTRY = "poultry"
FISH = "fish"
SHELLFISH = "shellfish"
DAIRY = "dairy"
EGG = "egg"
GLUTEN = "gluten"
NUTS = "nuts"
PEANUTS = "peanuts"
SOY = "soy"
HONEY = "honey"

_ANIMAL_FLESH = frozenset({MEAT, PORK, POULTRY, FISH, SHELLFISH})

# Normalised restriction label -> excluded ingredient tags
RESTRICTION_EXCLUSIONS: dict[str, frozenset[str]] = {
    "vegetarian": _ANIMAL_FLESH,
    "vegan": _ANIMAL_FLESH | {DAIRY, EGG, HONEY},
    "pescatarian": frozenset({MEAT, PORK, POULTRY}),
    "dairy-free": frozenset({DAIRY}),
    "lactose-intolerant": frozenset({DAIRY}),
    "gluten-free": frozenset({GLUTEN}),
    "celiac": frozenset({GLUTEN}),
    "nut-free": frozenset({NUTS, PEANUTS}),
    "nut-allergy": frozenset({NUTS, PEANUTS}),
    "peanut-allergy": frozenset({PEANUTS}),
    "egg-free": frozenset({EGG}),
    "shellfish-free": frozenset({SHELLFISH}),
    "shellfish-allergy": frozenset({SHELLFISH}),
    "soy-free": frozenset({SOY}),
    "halal": frozenset({PORK}),
    "kosher": frozenset({PORK, SHELLFISH}),
}

# Restrictions under which whey-based products are replaced by plant protein
PLANT_PROTEIN_RESTRICTIONS = frozenset({"vegan", "vegetarian", "dairy-free", "lactose-intolerant"})

# Diets that get plant protein whatever the goal
PLANT_BASED_DIETS = frozenset({"vegan", "vegetarian"})


def normalise_restriction(restriction: str) -> str:
    """'Dairy Free' / 'dairy_free' -> 'dairy-free'."""
    return "-".join(restriction.lower().replace("_", " ").replace("-", " ").split())


def _meal(
    name: str,
    ingredients: tuple[str, ...],
    calories: int,
    protein: int,
    carbs: int,
    fat: int,
    prep_time_min: int,
    difficulty: Difficulty,
    tags: frozenset[str] = frozenset(),
) -> MealSuggestion:
    return MealSuggestion(
        name=name,
        ingredients=ingredients,
        calories=calories,
        macros=MacroGrams(protein=protein, carbs=carbs, fat=fat),
        prep_time_min=prep_time_min,
        difficulty=difficulty,
        tags=tags,
    )


MEAL_CATALOG: dict[MealType, tuple[MealSuggestion, ...]] = {
    MealType.BREAKFAST: (
        _meal("Protein Oatmeal Bowl",
              ("Oats", "Whey protein", "Berries", "Almond butter"),
              350, 25, 45, 8, 10, Difficulty.EASY,
              frozenset({GLUTEN, DAIRY, NUTS})),
        _meal("Veggie Scramble",
              ("Eggs", "Spinach", "Tomatoes", "Cheese"),
              300, 20, 8, 18, 15, Difficulty.MEDIUM,
              frozenset({EGG, DAIRY})),
        _meal("Smoked Salmon Bagel",
              ("Whole grain bagel", "Smoked salmon", "Cream cheese", "Capers"),
              420, 24, 48, 14, 5, Difficulty.EASY,
              frozenset({GLUTEN, FISH, DAIRY})),
        _meal("Tofu Breakfast Burrito",
              ("Corn tortilla", "Firm tofu", "Black beans", "Salsa"),
              380, 22, 44, 12, 15, Difficulty.MEDIUM,
              frozenset({SOY})),
        _meal("Greek Yogurt Parfait",
              ("Greek yogurt", "Granola", "Honey", "Strawberries"),
              320, 20, 42, 8, 5, Difficulty.EASY,
              frozenset({DAIRY, GLUTEN, HONEY})),
    ),
    MealType.LUNCH: (
        _meal("Grilled Chicken Salad",
              ("Chicken breast", "Mixed greens", "Quinoa", "Olive oil dressing"),
              450, 35, 30, 15, 20, Difficulty.MEDIUM,
              frozenset({POULTRY})),
        _meal("Turkey Wrap",
              ("Whole wheat tortilla", "Turkey", "Avocado", "Vegetables"),
              400, 25, 35, 18, 10, Difficulty.EASY,
              frozenset({POULTRY, GLUTEN})),
        _meal("Chickpea Buddha Bowl",
              ("Chickpeas", "Brown rice", "Roasted vegetables", "Tahini"),
              480, 18, 62, 16, 25, Difficulty.MEDIUM),
        _meal("Lentil and Feta Salad",
              ("Green lentils", "Feta", "Cucumber", "Red onion", "Lemon"),
              430, 24, 45, 15, 15, Difficulty.EASY,
              frozenset({DAIRY})),
        _meal("Tuna Nicoise",
              ("Tuna", "Boiled eggs", "Green beans", "Potatoes", "Olives"),
              460, 34, 32, 20, 20, Difficulty.MEDIUM,
              frozenset({FISH, EGG})),
    ),
    MealType.DINNER: (
        _meal("Salmon with Sweet Potato",
              ("Salmon fillet", "Sweet potato", "Broccoli", "Olive oil"),
              500, 35, 40, 20, 30, Difficulty.MEDIUM,
              frozenset({FISH})),
        _meal("Lean Beef Stir-fry",
              ("Lean beef", "Mixed vegetables", "Brown rice", "Soy sauce"),
              480, 30, 45, 15, 25, Difficulty.MEDIUM,
              frozenset({MEAT, SOY, GLUTEN})),
        _meal("Tofu Vegetable Curry",
              ("Firm tofu", "Coconut milk", "Spinach", "Basmati rice"),
              520, 24, 55, 22, 30, Difficulty.MEDIUM,
              frozenset({SOY})),
        _meal("Black Bean Chili",
              ("Black beans", "Kidney beans", "Tomatoes", "Peppers", "Cumin"),
              450, 22, 65, 9, 40, Difficulty.EASY),
        _meal("Shrimp Pasta Primavera",
              ("Whole wheat pasta", "Shrimp", "Zucchini", "Parmesan"),
              540, 32, 60, 16, 25, Difficulty.MEDIUM,
              frozenset({SHELLFISH, GLUTEN, DAIRY})),
    ),
    MealType.SNACK: (
        _meal("Greek Yogurt with Nuts",
              ("Greek yogurt", "Mixed nuts", "Honey"),
              200, 15, 12, 10, 5, Difficulty.EASY,
              frozenset({DAIRY, NUTS, HONEY})),
        _meal("Apple with Peanut Butter",
              ("Apple", "Natural peanut butter"),
              180, 6, 20, 8, 2, Difficulty.EASY,
              frozenset({PEANUTS})),
        _meal("Hummus and Veggie Sticks",
              ("Hummus", "Carrots", "Cucumber", "Bell pepper"),
              160, 6, 18, 7, 5, Difficulty.EASY),
        _meal("Hard-boiled Eggs",
              ("Eggs", "Sea salt", "Black pepper"),
              140, 12, 1, 10, 12, Difficulty.EASY,
              frozenset({EGG})),
        _meal("Beef Jerky",
              ("Beef jerky",),
              120, 15, 6, 3, 0, Difficulty.EASY,
              frozenset({MEAT})),
    ),
}

SAFE_SUGGESTIONS: dict[MealType, MealSuggestion] = {
    MealType.BREAKFAST: _meal(
        "Fruit and Seed Bowl",
        ("Banana", "Berries", "Chia seeds", "Pumpkin seeds"),
        300, 8, 48, 10, 5, Difficulty.EASY,
    ),
    MealType.LUNCH: _meal(
        "Rice, Bean and Vegetable Bowl",
        ("Brown rice", "Pinto beans", "Roasted vegetables", "Olive oil"),
        450, 16, 70, 12, 20, Difficulty.EASY,
    ),
    MealType.DINNER: _meal(
        "Lentil and Vegetable Stew",
        ("Red lentils", "Carrots", "Celery", "Tomatoes", "Potatoes"),
        480, 24, 78, 6, 35, Difficulty.EASY,
    ),
    MealType.SNACK: _meal(
        "Fresh Fruit and Rice Cakes",
        ("Apple", "Orange", "Plain rice cakes"),
        170, 3, 38, 1, 2, Difficulty.EASY,
    ),
}
