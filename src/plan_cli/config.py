"""Environment-variable-based configuration for the plan CLI."""

from __future__ import annotations

import os
from pathlib import Path

LOG_LEVEL: str = os.environ.get("PLAN_LOG_LEVEL", "INFO").upper()
# Shared with the dashboard, which saves profiles under streamlit_app/profiles/
PROFILE_PATH: Path = Path(
    os.environ.get("PLAN_PROFILE_PATH", "streamlit_app/profiles/my_profile.json")
)
OUTPUT_DIR: Path | None = (
    Path(os.environ["PLAN_OUTPUT_DIR"]).expanduser()
    if os.environ.get("PLAN_OUTPUT_DIR")
    else None
)
JSON_INDENT: int = int(os.environ.get("PLAN_JSON_INDENT", "2"))
