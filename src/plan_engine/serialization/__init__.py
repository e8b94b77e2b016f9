"""Serialization module — onboarding payloads in, plan documents out."""

from plan_engine.serialization.plan_json import to_plan_dict, to_plan_json_string
from plan_engine.serialization.profile import profile_from_dict

__all__ = ["profile_from_dict", "to_plan_dict", "to_plan_json_string"]
