"""Tests for the gamma search."""

from __future__ import annotations

import numpy as np
import pytest

from book_pictures.errors import InvalidConfigError, NoSolutionError
from book_pictures.gamma import GammaSolution, find_gamma
from book_pictures.halftone import count_ink
from book_pictures.pixels import PixelSource


class TestWhiteImage:
    def test_zero_target_matches_first_candidate(self, white_pixels):
        solution = find_gamma(white_pixels, 3, 0)
        assert solution.gamma == 1.0
        assert solution.ink_count == 0
        assert solution.error == 0
        assert solution.iterations == 1

    def test_any_ink_is_unreachable(self, white_pixels):
        with pytest.raises(NoSolutionError) as excinfo:
            find_gamma(white_pixels, 3, 1)
        assert excinfo.value.target == 1
        assert excinfo.value.best_count == 0


class TestBlackImage:
    def test_solution_never_undershoots(self, black_pixels):
        solution = find_gamma(black_pixels, 3, 20)
        assert solution.ink_count >= 20
        # every pixel is full whatever the gamma
        assert solution.ink_count == 2 * 2 * 9
        assert solution.error == 16

    def test_target_at_capacity_matches_exactly(self, black_pixels):
        solution = find_gamma(black_pixels, 3, 36)
        assert solution.ink_count == 36
        assert solution.error == 0

    def test_target_above_capacity_has_no_solution(self, black_pixels):
        with pytest.raises(NoSolutionError) as excinfo:
            find_gamma(black_pixels, 3, 37)
        assert excinfo.value.best_count == 36


class TestGradientImage:
    def test_exact_count_at_initial_gamma(self, gradient_pixels):
        target = count_ink(gradient_pixels, 4, 1.0)
        solution = find_gamma(gradient_pixels, 4, target)
        assert solution == GammaSolution(1.0, target, target, 1)

    @pytest.mark.parametrize("fraction", [0.2, 0.5, 0.8])
    def test_result_is_over_and_reproducible(self, gradient_pixels, fraction):
        capacity = gradient_pixels.width * gradient_pixels.height * 16
        target = int(capacity * fraction)
        solution = find_gamma(gradient_pixels, 4, target)
        assert solution.ink_count >= target
        assert count_ink(gradient_pixels, 4, solution.gamma) == solution.ink_count
        assert 0 < solution.gamma < 100

    def test_iteration_limit(self, gradient_pixels):
        target = count_ink(gradient_pixels, 4, 1.0) - 1
        solution = find_gamma(gradient_pixels, 4, target, max_iterations=1)
        assert solution.iterations == 1
        assert solution.gamma == 1.0
        assert solution.error == 1

    def test_search_terminates_within_limit(self, gradient_pixels):
        solution = find_gamma(gradient_pixels, 4, 1)
        assert solution.iterations <= 64
        assert solution.ink_count >= 1

    def test_zero_target_keeps_searching_for_least_ink(self, gradient_pixels):
        solution = find_gamma(gradient_pixels, 4, 0)
        assert solution.ink_count > 0
        assert solution.gamma > 1.0


class TestArguments:
    def test_negative_target(self, gradient_pixels):
        with pytest.raises(InvalidConfigError):
            find_gamma(gradient_pixels, 4, -1)

    def test_zero_grid_size(self, gradient_pixels):
        with pytest.raises(InvalidConfigError):
            find_gamma(gradient_pixels, 0, 10)

    def test_partially_transparent_image(self):
        pixels = PixelSource.from_arrays(np.full((4, 4), 255), alpha=np.full((4, 4), 128))
        solution = find_gamma(pixels, 2, 40)
        assert solution.ink_count >= 40
