"""Generate a personalized plan from a profile JSON file.

Usage:
    python -m plan_cli.generate --profile streamlit_app/profiles/my_profile.json
    python -m plan_cli.generate --profile me.json --output plan.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from plan_engine import PlanEngine, PlanEngineError
from plan_engine.serialization import profile_from_dict, to_plan_json_string

from plan_cli.config import JSON_INDENT, LOG_LEVEL, OUTPUT_DIR, PROFILE_PATH

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CANNOT_GENERATE = 2


def _load_profile(path: Path) -> dict:
    """Load a profile payload from disk."""
    with open(path) as f:
        return json.load(f)


def _output_path(profile_path: Path, output: Path | None) -> Path | None:
    """Resolve where the plan goes; ``None`` means stdout."""
    if output is not None:
        return output
    if OUTPUT_DIR is not None:
        return OUTPUT_DIR / f"{profile_path.stem}_plan.json"
    return None


def run(profile_path: Path, output: Path | None = None) -> int:
    """Generate one plan and write it out. Returns the process exit code."""
    try:
        payload = _load_profile(profile_path)
    except FileNotFoundError:
        logger.error("Profile not found at %s", profile_path)
        print(f"cannot generate plan: profile not found at {profile_path}", file=sys.stderr)
        return EXIT_CANNOT_GENERATE

    try:
        plan = PlanEngine().generate_plan(profile_from_dict(payload))
    except PlanEngineError as exc:
        logger.error("Plan generation failed: %s", exc)
        print(f"cannot generate plan: {exc}", file=sys.stderr)
        return EXIT_CANNOT_GENERATE

    text = to_plan_json_string(plan, indent=JSON_INDENT)
    destination = _output_path(profile_path, output)
    if destination is None:
        print(text)
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text + "\n")
        logger.info("Wrote plan to %s", destination)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a training and nutrition plan")
    parser.add_argument(
        "--profile", type=Path, default=PROFILE_PATH,
        help=f"Profile JSON file (default: {PROFILE_PATH})",
    )
    parser.add_argument(
        "--output", type=Path, default=None,
        help="Write the plan here instead of stdout",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(args.profile, args.output)


if __name__ == "__main__":
    sys.exit(main())
