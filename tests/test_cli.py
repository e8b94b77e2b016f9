"""Tests for the plan generation CLI."""

import importlib
import json
from pathlib import Path

import pytest

import helpers
from plan_cli import config, generate
from plan_cli.generate import EXIT_CANNOT_GENERATE, EXIT_OK, main, run


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "sam.json"
    path.write_text(json.dumps({
        "goal": "muscle_growth",
        "fitnessLevel": "intermediate",
        "trainDaysPerWeek": 3,
        "cardioDaysPerWeek": 1,
        "canDoMore": True,
        "dailyCalories": 2000,
        "pastInjuries": ["Shoulder injury"],
        "dietaryRestrictions": ["Vegetarian"],
    }))
    return path


class TestRun:
    def test_prints_plan_to_stdout(self, profile_file, capsys, monkeypatch) -> None:
        monkeypatch.setattr(generate, "OUTPUT_DIR", None)
        assert run(profile_file) == EXIT_OK
        plan = json.loads(capsys.readouterr().out)
        assert len(plan["trainingRegimen"]) == 7

    def test_writes_output_file(self, profile_file, tmp_path) -> None:
        out = tmp_path / "plans" / "plan.json"
        assert run(profile_file, out) == EXIT_OK
        assert json.loads(out.read_text())["version"] == 1

    def test_output_dir_from_config(self, profile_file, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(generate, "OUTPUT_DIR", tmp_path / "out")
        assert run(profile_file) == EXIT_OK
        assert (tmp_path / "out" / "sam_plan.json").exists()

    def test_invalid_profile_exits_2(self, tmp_path, capsys) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({
            "goal": "muscle_growth", "fitnessLevel": "beginner",
            "trainDaysPerWeek": 6, "cardioDaysPerWeek": 3, "dailyCalories": 2000,
        }))
        assert run(bad) == EXIT_CANNOT_GENERATE
        assert "cannot generate plan" in capsys.readouterr().err

    def test_missing_profile_exits_2(self, tmp_path, capsys) -> None:
        assert run(tmp_path / "nope.json") == EXIT_CANNOT_GENERATE
        assert "cannot generate plan" in capsys.readouterr().err


class TestMain:
    def test_arguments(self, profile_file, tmp_path) -> None:
        out = tmp_path / "plan.json"
        assert main(["--profile", str(profile_file), "--output", str(out)]) == EXIT_OK
        assert out.exists()


class TestConfig:
    def test_default_profile_lives_with_dashboard_profiles(self, monkeypatch) -> None:
        monkeypatch.delenv("PLAN_PROFILE_PATH", raising=False)
        default = importlib.reload(config).PROFILE_PATH
        repo_root = Path(helpers.__file__).resolve().parent.parent
        assert (repo_root / default).parent == helpers.PROFILES_DIR.resolve()
        assert default.stem in helpers.list_profiles()
