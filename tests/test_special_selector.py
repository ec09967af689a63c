"""
Tests for Daily Double selection.
"""

import random
from collections import Counter

import pytest

from engine.special_selector import SpecialQuestionSelector
from models.board import BoardModel, Coordinate
from tests.conftest import make_template


class TestSpecialQuestionSelector:
    """Tests for sampling special coordinates."""

    def setup_method(self):
        self.board = BoardModel.from_template(make_template(names=("A", "B", "C")))

    def test_selects_two_distinct_present_slots(self):
        """Exactly two different slots that hold questions are chosen."""
        chosen = SpecialQuestionSelector(rng=random.Random(1)).select(self.board)

        assert len(chosen) == 2
        present = set(self.board.present_coordinates())
        assert chosen <= present

    def test_result_is_immutable(self):
        """The selection is a frozenset."""
        chosen = SpecialQuestionSelector(rng=random.Random(1)).select(self.board)

        assert isinstance(chosen, frozenset)

    def test_same_seed_same_selection(self):
        """A seeded random source gives reproducible picks."""
        first = SpecialQuestionSelector(rng=random.Random(42)).select(self.board)
        second = SpecialQuestionSelector(rng=random.Random(42)).select(self.board)

        assert first == second

    def test_skips_consumed_slots(self):
        """Consumed slots are never chosen."""
        for coord in self.board.present_coordinates()[:-2]:
            self.board.consume(*coord)
        remaining = set(self.board.present_coordinates())

        chosen = SpecialQuestionSelector(rng=random.Random(3)).select(self.board)

        assert chosen == remaining

    @pytest.mark.parametrize("keep, expected", [(1, 1), (0, 0)])
    def test_small_board_returns_what_exists(self, keep, expected):
        """Boards with fewer than two questions do not fail."""
        coords = self.board.present_coordinates()
        for coord in coords[keep:]:
            self.board.consume(*coord)

        chosen = SpecialQuestionSelector(rng=random.Random(0)).select(self.board)

        assert len(chosen) == expected

    def test_selection_is_roughly_uniform(self):
        """Every slot is picked about equally often."""
        rng = random.Random(2024)
        selector = SpecialQuestionSelector(rng=rng)
        counts = Counter()
        draws = 6000

        for _ in range(draws):
            counts.update(selector.select(self.board))

        slots = self.board.remaining_count
        expected = draws * 2 / slots
        assert set(counts) == set(self.board.present_coordinates())
        for coord in self.board.present_coordinates():
            assert abs(counts[coord] - expected) < expected * 0.2

    def test_custom_count(self):
        """The number of Daily Doubles is configurable."""
        chosen = SpecialQuestionSelector(count=4, rng=random.Random(5)).select(self.board)

        assert len(chosen) == 4

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            SpecialQuestionSelector(count=-1)

    def test_coordinates_are_named_tuples(self):
        """Chosen coordinates compare equal to plain (category, row) pairs."""
        chosen = SpecialQuestionSelector(rng=random.Random(9)).select(self.board)

        for coord in chosen:
            assert isinstance(coord, Coordinate)
            assert (coord.category, coord.row) in chosen
