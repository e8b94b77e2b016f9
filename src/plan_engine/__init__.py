"""Deterministic training and nutrition plan generation from a fitness profile."""

from plan_engine.engine import PlanEngine, generate_plan
from plan_engine.exceptions import (
    ConstraintUnsatisfiable,
    PlanEngineError,
    ValidationError,
)
from plan_engine.models.plan import PersonalizedPlan
from plan_engine.models.profile import FitnessUser

__all__ = [
    "ConstraintUnsatisfiable",
    "FitnessUser",
    "PersonalizedPlan",
    "PlanEngine",
    "PlanEngineError",
    "ValidationError",
    "generate_plan",
]
