"""Custom exception hierarchy for the plan engine."""

from __future__ import annotations


class PlanEngineError(Exception):
    """Base exception for all plan_engine errors."""


class ValidationError(PlanEngineError):
    """The input profile is malformed or out of range.

    ``field`` names the first offending profile field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ConstraintUnsatisfiable(PlanEngineError):
    """An internal invariant cannot be met (e.g. a catalog was exhausted)."""
