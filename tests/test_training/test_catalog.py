"""Tests for the exercise rule tables."""

import pytest

from plan_engine.models.enums import ExerciseKind, ExperienceLevel, Goal, SessionFocus
from plan_engine.training.catalog import (
    CARDIO_TABLE,
    FALLBACK_TABLE,
    FLEXIBILITY_TABLE,
    STRENGTH_SPLITS,
    STRENGTH_TABLE,
    candidates_for,
    split_exercises,
    split_for,
)


class TestTableCoverage:
    @pytest.mark.parametrize("level", list(ExperienceLevel))
    @pytest.mark.parametrize("goal", list(Goal))
    def test_every_combination_has_candidates(self, level, goal) -> None:
        assert STRENGTH_TABLE[(level, goal)]
        assert CARDIO_TABLE[(level, goal)]

    def test_kinds_match_tables(self) -> None:
        for exercises in STRENGTH_TABLE.values():
            assert all(e.kind is ExerciseKind.STRENGTH for e in exercises)
        for exercises in CARDIO_TABLE.values():
            assert all(e.kind is ExerciseKind.CARDIO for e in exercises)
        for exercises in FLEXIBILITY_TABLE.values():
            assert all(e.kind is ExerciseKind.FLEXIBILITY for e in exercises)

    def test_every_level_has_untagged_stretch(self) -> None:
        for stretches in FLEXIBILITY_TABLE.values():
            assert any(not s.muscle_groups for s in stretches)

    @pytest.mark.parametrize("focus", list(SessionFocus))
    def test_every_focus_has_untagged_fallback(self, focus) -> None:
        assert any(not f.muscle_groups for f in FALLBACK_TABLE[focus])

    def test_volume_is_specified(self) -> None:
        for table in (STRENGTH_TABLE, CARDIO_TABLE):
            for exercises in table.values():
                for e in exercises:
                    assert e.reps is not None or e.duration_s is not None


class TestGoalShapesPrescription:
    def test_fat_loss_rests_shorter(self) -> None:
        fat_loss = STRENGTH_TABLE[(ExperienceLevel.INTERMEDIATE, Goal.FAT_LOSS)]
        growth = STRENGTH_TABLE[(ExperienceLevel.INTERMEDIATE, Goal.MUSCLE_GROWTH)]
        assert max(e.rest_time_s for e in fat_loss) < min(e.rest_time_s for e in growth)


class TestCandidatesFor:
    def test_strength_lookup(self) -> None:
        assert candidates_for(
            SessionFocus.STRENGTH, ExperienceLevel.ADVANCED, Goal.MUSCLE_GROWTH,
        ) == STRENGTH_TABLE[(ExperienceLevel.ADVANCED, Goal.MUSCLE_GROWTH)]

    def test_cardio_lookup(self) -> None:
        assert candidates_for(
            SessionFocus.CARDIO, ExperienceLevel.BEGINNER, Goal.FAT_LOSS,
        ) == CARDIO_TABLE[(ExperienceLevel.BEGINNER, Goal.FAT_LOSS)]

    def test_strength_lookup_with_split(self) -> None:
        split = split_for(Goal.FAT_LOSS, 2)
        names = [e.name for e in candidates_for(
            SessionFocus.STRENGTH, ExperienceLevel.BEGINNER, Goal.FAT_LOSS, split,
        )]
        assert names == ["Bodyweight Squats", "Glute Bridges", "Step-ups"]


class TestStrengthSplits:
    def test_split_names_per_goal(self) -> None:
        assert [s.name for s in STRENGTH_SPLITS[Goal.FAT_LOSS]] == [
            "HIIT Cardio", "Upper Body Strength", "Lower Body Strength", "Cardio Blast",
        ]
        assert [s.name for s in STRENGTH_SPLITS[Goal.MUSCLE_GROWTH]] == [
            "Push Day", "Pull Day", "Leg Day", "Upper Body",
        ]

    @pytest.mark.parametrize("level", list(ExperienceLevel))
    @pytest.mark.parametrize("goal", list(Goal))
    def test_every_split_resolves(self, level, goal) -> None:
        for split in STRENGTH_SPLITS[goal]:
            assert split.target_muscle_groups
            assert len(split_exercises(split, level, goal)) >= 2

    def test_pool_names_unique(self) -> None:
        for exercises in STRENGTH_TABLE.values():
            names = [e.name for e in exercises]
            assert len(names) == len(set(names))

    def test_split_for_wraps(self) -> None:
        assert split_for(Goal.MUSCLE_GROWTH, 4) == split_for(Goal.MUSCLE_GROWTH, 0)
        assert split_for(Goal.MUSCLE_GROWTH, 3).name == "Upper Body"
