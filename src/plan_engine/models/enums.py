"""Enumerations and policy constants for the plan engine.

Every number the engine uses to shape a plan lives here so that changing a
policy is a data change, not a logic change.
"""

from enum import IntEnum, auto


class Goal(IntEnum):
    """Primary fitness goal chosen during onboarding."""

    FAT_LOSS = auto()
    MUSCLE_GROWTH = auto()


class ExperienceLevel(IntEnum):
    """Self-reported training experience."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class ExerciseKind(IntEnum):
    STRENGTH = auto()
    CARDIO = auto()
    FLEXIBILITY = auto()


class SessionFocus(IntEnum):
    """Emphasis of a training day."""

    STRENGTH = auto()
    CARDIO = auto()


class MealType(IntEnum):
    """The four canonical meal slots, in serving order."""

    BREAKFAST = auto()
    LUNCH = auto()
    DINNER = auto()
    SNACK = auto()


class Difficulty(IntEnum):
    EASY = auto()
    MEDIUM = auto()
    HARD = auto()


class Weekday(IntEnum):
    """Calendar days, Monday first (0-indexed to match slot positions)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class ProgressionPhase(IntEnum):
    """Multi-week progression phase derived from experience level."""

    FOUNDATION = auto()
    DEVELOPMENT = auto()
    ADVANCED = auto()


def label(member: IntEnum) -> str:
    """Lower-case wire label for an enum member, e.g. Goal.FAT_LOSS -> 'fat_loss'."""
    return member.name.lower()


# ---------------------------------------------------------------------------
# Schedule constants
# ---------------------------------------------------------------------------
DAYS_PER_WEEK = 7

# Runs of the same day type longer than this are avoided where the count allows
MAX_PREFERRED_RUN_DAYS = 2

# ---------------------------------------------------------------------------
# Volume boost ("can do more") — volume only, never extra exercises
# ---------------------------------------------------------------------------
VOLUME_BOOST_EXTRA_SETS = 1
VOLUME_BOOST_DURATION_FACTOR = 1.2

# Injury labels and tags are compared word by word; shorter words are ignored
MIN_MATCH_WORD_LEN = 3

# ---------------------------------------------------------------------------
# Calorie burn estimates (kcal per minute of work)
# ---------------------------------------------------------------------------
KCAL_PER_MIN_BY_KIND = {
    ExerciseKind.STRENGTH: 6.0,
    ExerciseKind.CARDIO: 8.0,
    ExerciseKind.FLEXIBILITY: 3.0,
}

LEVEL_BURN_MULTIPLIER = {
    ExperienceLevel.BEGINNER: 0.8,
    ExperienceLevel.INTERMEDIATE: 1.0,
    ExperienceLevel.ADVANCED: 1.2,
}

# Time under tension for one rep of a set-based exercise
SECONDS_PER_REP = 3

# ---------------------------------------------------------------------------
# Nutrition constants
# ---------------------------------------------------------------------------
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

# Hydration: 35 ml per kg body weight, never below 2 L
HYDRATION_ML_PER_KG = 35
MIN_HYDRATION_L = 2.0
DEFAULT_WEIGHT_KG = 70.0

# Share of daily calories and macros per meal (sums to 1.0)
MEAL_PROPORTIONS = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.30,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.15,
}

MAX_SUGGESTIONS_PER_MEAL = 3
MIN_SUGGESTIONS_PER_MEAL = 2

# Always-included supplements, in output order
BASELINE_SUPPLEMENTS = ("Multivitamin", "Omega-3")

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
PROGRESSION_PHASE_WEEKS = 8
