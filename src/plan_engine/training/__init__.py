"""Training side of the plan: weekly schedule and exercise selection."""

from plan_engine.training.progression import progression_for
from plan_engine.training.schedule import SlotAssignment, allocate_week
from plan_engine.training.selector import DaySelection, select_exercises

__all__ = [
    "DaySelection",
    "SlotAssignment",
    "allocate_week",
    "progression_for",
    "select_exercises",
]
