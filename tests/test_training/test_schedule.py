"""Tests for weekly schedule allocation."""

import pytest

from plan_engine.models.enums import SessionFocus, Weekday
from plan_engine.training.schedule import (
    allocate_training_days,
    allocate_week,
    cardio_slot_count,
    even_spacing_baseline,
    longest_run,
)


class TestEvenSpacingBaseline:
    def test_three_days(self) -> None:
        assert list(even_spacing_baseline(3)) == [0, 2, 4]

    def test_four_days(self) -> None:
        assert list(even_spacing_baseline(4)) == [0, 1, 3, 5]

    def test_zero_days(self) -> None:
        assert len(even_spacing_baseline(0)) == 0


class TestLongestRun:
    def test_alternating(self) -> None:
        assert longest_run((0, 2, 4, 6)) == 1

    def test_rest_block(self) -> None:
        # Training Mon/Tue, rest Wed..Sun
        assert longest_run((0, 1)) == 5

    def test_all_training(self) -> None:
        assert longest_run(tuple(range(7))) == 7


class TestAllocateTrainingDays:
    @pytest.mark.parametrize(
        "n,expected",
        [
            (0, ()),
            (1, (0,)),
            (2, (1, 4)),
            (3, (0, 2, 4)),
            (4, (0, 1, 3, 5)),
            (5, (0, 1, 3, 4, 6)),
            (6, (0, 1, 2, 3, 4, 5)),
            (7, (0, 1, 2, 3, 4, 5, 6)),
        ],
    )
    def test_placement(self, n: int, expected: tuple) -> None:
        assert allocate_training_days(n) == expected

    def test_clamped_above_seven(self) -> None:
        assert len(allocate_training_days(9)) == 7

    @pytest.mark.parametrize("n", range(2, 6))
    def test_no_three_in_a_row_when_avoidable(self, n: int) -> None:
        assert longest_run(allocate_training_days(n)) <= 2

    @pytest.mark.parametrize("n", [1, 6])
    def test_unavoidable_long_run_keeps_baseline(self, n: int) -> None:
        assert allocate_training_days(n) == tuple(even_spacing_baseline(n))

    def test_single_day_is_monday(self) -> None:
        week = allocate_week(1, 0)
        assert [s.day for s in week if not s.is_rest] == [Weekday.MONDAY]

    def test_deterministic(self) -> None:
        assert allocate_training_days(5) == allocate_training_days(5)


class TestCardioSlotCount:
    def test_proportional(self) -> None:
        assert cardio_slot_count(3, 1) == 1

    def test_scaled_when_clamped(self) -> None:
        # 5 + 3 requested, only 7 days: 7 * 3 / 8 = 2.625 -> 3
        assert cardio_slot_count(5, 3) == 3

    def test_no_days(self) -> None:
        assert cardio_slot_count(0, 0) == 0

    def test_cardio_only(self) -> None:
        assert cardio_slot_count(0, 4) == 4


class TestAllocateWeek:
    def test_seven_slots_in_order(self) -> None:
        week = allocate_week(3, 1)
        assert [s.day for s in week] == list(Weekday)

    def test_example_layout(self) -> None:
        week = allocate_week(3, 1)
        assert [s.focus for s in week] == [
            SessionFocus.CARDIO, SessionFocus.STRENGTH, None,
            SessionFocus.STRENGTH, None, SessionFocus.STRENGTH, None,
        ]

    @pytest.mark.parametrize("train,cardio", [(0, 0), (2, 2), (3, 3), (7, 0), (0, 7), (4, 3)])
    def test_training_count(self, train: int, cardio: int) -> None:
        week = allocate_week(train, cardio)
        assert sum(not s.is_rest for s in week) == min(train + cardio, 7)

    def test_focus_split(self) -> None:
        week = allocate_week(2, 3)
        focuses = [s.focus for s in week if not s.is_rest]
        assert focuses.count(SessionFocus.CARDIO) == 3
        assert focuses.count(SessionFocus.STRENGTH) == 2
