"""Tests for supplement recommendations."""

import pytest

from plan_engine.models.enums import BASELINE_SUPPLEMENTS, Goal
from plan_engine.nutrition.supplements import recommend_supplements


class TestRecommendSupplements:
    def test_baseline_first(self) -> None:
        for goal in Goal:
            assert recommend_supplements(goal)[:2] == BASELINE_SUPPLEMENTS

    def test_muscle_growth(self) -> None:
        assert recommend_supplements(Goal.MUSCLE_GROWTH) == (
            "Multivitamin", "Omega-3", "Creatine", "Whey protein", "BCAAs",
        )

    def test_fat_loss_has_no_creatine(self) -> None:
        supplements = recommend_supplements(Goal.FAT_LOSS)
        assert "Creatine" not in supplements
        assert "BCAAs" not in supplements
        assert "Green tea extract" in supplements

    def test_vegan_gets_plant_protein(self) -> None:
        supplements = recommend_supplements(Goal.MUSCLE_GROWTH, ["Vegan"])
        assert supplements == (
            "Multivitamin", "Omega-3", "Creatine", "Plant protein", "BCAAs",
        )

    @pytest.mark.parametrize("diet", ["vegan", "Vegetarian"])
    def test_plant_protein_on_fat_loss(self, diet: str) -> None:
        supplements = recommend_supplements(Goal.FAT_LOSS, [diet])
        assert supplements[-1] == "Plant protein"
        assert "Whey protein" not in supplements

    def test_dairy_free_swaps_without_adding(self) -> None:
        assert "Plant protein" not in recommend_supplements(Goal.FAT_LOSS, ["dairy-free"])
        assert "Plant protein" in recommend_supplements(Goal.MUSCLE_GROWTH, ["dairy-free"])

    def test_no_duplicates(self) -> None:
        supplements = recommend_supplements(Goal.MUSCLE_GROWTH, ["vegan", "dairy-free"])
        assert len(supplements) == len(set(supplements))
