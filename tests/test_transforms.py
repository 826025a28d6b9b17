"""Tests for the in-place board transformations."""

import numpy as np
import pytest

from src.board import (
    ROUNDS,
    build,
    is_latin_square,
    make_board,
    randomize,
    rotate90_inplace,
    shift_rows_left,
)
from src.errors import DomainError, ShapeError


class TestRotate90:
    """Tests for the quarter rotation."""

    def test_rotate_3x3_exact(self):
        """One quarter turn of build(3) should follow the 4-cycle rule."""
        grid = build(3)
        rotate90_inplace(grid)
        np.testing.assert_array_equal(grid, [[1, 2, 0], [2, 0, 1], [0, 1, 2]])

    def test_rotate_returns_same_object(self):
        """Rotation should mutate and return its argument."""
        grid = build(4)
        assert rotate90_inplace(grid) is grid

    @pytest.mark.parametrize("n", range(0, 9))
    def test_matches_clockwise_rot90(self, n):
        """Rotation should equal numpy's clockwise quarter turn for any content."""
        grid = np.arange(n * n, dtype=np.int64).reshape(n, n)
        expected = np.rot90(grid, k=-1).copy()
        rotate90_inplace(grid)
        np.testing.assert_array_equal(grid, expected)

    @pytest.mark.parametrize("n", range(0, 9))
    def test_four_turns_are_identity(self, n):
        """Four quarter turns should restore the board."""
        grid = build(n)
        original = grid.copy()
        for _ in range(4):
            rotate90_inplace(grid)
        np.testing.assert_array_equal(grid, original)

    @pytest.mark.parametrize("seed", range(20))
    def test_preserves_latin_square(self, seed):
        """Rotating a scrambled Latin square should keep it Latin."""
        rng = np.random.default_rng(seed)
        grid = make_board(5, rng=rng)
        rotate90_inplace(grid)
        assert is_latin_square(grid)

    def test_single_cell_noop(self):
        grid = build(1)
        rotate90_inplace(grid)
        np.testing.assert_array_equal(grid, [[0]])

    def test_non_square_raises_without_mutation(self):
        """Non-square input should fail before touching any cell."""
        grid = np.arange(6).reshape(2, 3)
        original = grid.copy()
        with pytest.raises(ShapeError):
            rotate90_inplace(grid)
        np.testing.assert_array_equal(grid, original)


class TestShiftRowsLeft:
    """Tests for the uniform row shift."""

    def test_shift_by_one(self):
        grid = build(3)
        shift_rows_left(grid, 1)
        np.testing.assert_array_equal(grid, [[1, 2, 0], [0, 1, 2], [2, 0, 1]])

    def test_shift_by_n_is_identity(self):
        grid = build(5)
        shift_rows_left(grid, 5)
        np.testing.assert_array_equal(grid, build(5))

    @pytest.mark.parametrize("shift", range(6))
    def test_preserves_latin_square(self, shift):
        grid = build(5)
        shift_rows_left(grid, shift)
        assert is_latin_square(grid)

    def test_empty_board(self):
        assert shift_rows_left(build(0), 3).shape == (0, 0)


def reference_randomize(board, rng, rounds):
    """Out-of-place rendition of the randomizer used as an oracle."""
    n = board.shape[0]
    for _ in range(rounds):
        shift = int(rng.integers(0, n))
        rng.shuffle(board)
        board = np.rot90(board, k=-1)
        board = np.roll(board, -shift, axis=1)
    return board


class TestRandomize:
    """Tests for the board randomizer."""

    @pytest.mark.parametrize("n", range(1, 8))
    @pytest.mark.parametrize("seed", range(25))
    def test_preserves_latin_square(self, n, seed):
        """Randomized boards should stay n×n Latin squares."""
        grid = randomize(build(n), np.random.default_rng(seed))
        assert grid.shape == (n, n)
        assert is_latin_square(grid)

    def test_mutates_in_place(self):
        grid = build(5)
        assert randomize(grid, np.random.default_rng(0)) is grid

    def test_same_seed_same_board(self):
        """A seeded generator should give a reproducible board."""
        a = randomize(build(5), np.random.default_rng(1234))
        b = randomize(build(5), np.random.default_rng(1234))
        np.testing.assert_array_equal(a, b)

    def test_different_seeds_differ(self):
        """Different seeds should not all collapse to one board."""
        boards = {randomize(build(5), np.random.default_rng(s)).tobytes() for s in range(10)}
        assert len(boards) > 1

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_reference_procedure(self, seed):
        """Each round should be shift draw, row shuffle, quarter turn, row shift."""
        expected = reference_randomize(build(5), np.random.default_rng(seed), ROUNDS)
        grid = randomize(build(5), np.random.default_rng(seed))
        np.testing.assert_array_equal(grid, expected)

    def test_zero_rounds_is_noop(self):
        grid = randomize(build(4), np.random.default_rng(0), rounds=0)
        np.testing.assert_array_equal(grid, build(4))

    def test_single_cell_noop(self):
        grid = randomize(build(1), np.random.default_rng(0))
        np.testing.assert_array_equal(grid, [[0]])

    def test_empty_board_raises(self):
        with pytest.raises(DomainError):
            randomize(build(0), np.random.default_rng(0))

    def test_negative_rounds_raises(self):
        with pytest.raises(DomainError):
            randomize(build(3), np.random.default_rng(0), rounds=-1)

    def test_non_latin_raises(self):
        grid = np.zeros((3, 3), dtype=np.int64)
        with pytest.raises(DomainError):
            randomize(grid, np.random.default_rng(0))

    def test_non_square_raises(self):
        with pytest.raises(ShapeError):
            randomize(np.zeros((2, 3), dtype=np.int64), np.random.default_rng(0))


class TestMakeBoard:
    """Tests for the build-and-randomize convenience."""

    def test_default_size(self):
        grid = make_board()
        assert grid.shape == (5, 5)
        assert is_latin_square(grid)

    def test_seeded(self):
        a = make_board(5, rng=np.random.default_rng(7))
        b = randomize(build(5), np.random.default_rng(7))
        np.testing.assert_array_equal(a, b)
