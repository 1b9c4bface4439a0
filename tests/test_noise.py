"""Tests for the grid type and the noise stages."""

import numpy as np
import pytest


def test_grid_indexing_is_row_major():
    from heightforge.grid import Grid
    grid = Grid([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    assert grid.width == 3
    assert grid.height == 2
    assert grid.at(1, 0) == 4.0
    assert grid[0][2] == 3.0
    assert grid[1, 2] == 6.0


def test_grid_with_dimensions():
    from heightforge.grid import Grid
    grid = Grid.with_dimensions(5, 3, fill=0.25)
    assert grid.shape == (3, 5)
    assert np.all(grid.values == 0.25)


@pytest.mark.parametrize("size", [(0, 3), (3, 0)])
def test_grid_rejects_empty(size):
    from heightforge.grid import Grid, InvalidDimension
    with pytest.raises(InvalidDimension):
        Grid.with_dimensions(*size)


def test_grid_rejects_non_2d():
    from heightforge.grid import Grid, InvalidDimension
    with pytest.raises(InvalidDimension):
        Grid([1.0, 2.0, 3.0])


def test_grid_is_read_only():
    from heightforge.grid import Grid
    source = np.zeros((2, 2))
    grid = Grid(source)
    with pytest.raises(ValueError):
        grid.values[0, 0] = 1.0
    # The grid owns a copy, not the caller's array
    source[0, 0] = 9.0
    assert grid.at(0, 0) == 0.0


def test_white_noise_dimensions():
    from heightforge.noise import white_noise
    noise = white_noise(10, 10)
    assert len(noise) == 10
    for row in noise:
        assert len(row) == 10

    noise = white_noise(7, 3)
    assert noise.width == 7
    assert noise.height == 3


def test_white_noise_deterministic():
    from heightforge.noise import white_noise
    np.testing.assert_array_equal(white_noise(30, 20).values,
                                  white_noise(30, 20).values)


def test_white_noise_not_degenerate():
    from heightforge.noise import white_noise
    noise = white_noise(10, 1)
    assert not np.all(noise[0] == 0.0)


def test_white_noise_range():
    from heightforge.noise import white_noise
    noise = white_noise(100, 100)
    assert noise.values.min() >= 0.0
    assert noise.values.max() < 1.0


@pytest.mark.parametrize("size", [(0, 5), (5, 0)])
def test_white_noise_rejects_zero_dimension(size):
    from heightforge.grid import InvalidDimension
    from heightforge.noise import white_noise
    with pytest.raises(InvalidDimension):
        white_noise(*size)


def test_octave_zero_is_identity():
    from heightforge.noise import smooth_noise, white_noise
    noise = white_noise(13, 9)
    np.testing.assert_array_equal(smooth_noise(noise, 0).values,
                                  noise.values)


def test_smooth_preserves_dimensions():
    from heightforge.noise import smooth_noise, white_noise
    noise = white_noise(11, 5)
    for octave in range(7):
        assert smooth_noise(noise, octave).shape == (5, 11)


def test_smooth_wraps_to_single_block():
    from heightforge.noise import smooth_noise, white_noise
    noise = white_noise(4, 4)
    smoothed = smooth_noise(noise, 2)
    assert np.all(smoothed.values == noise.at(0, 0))


def test_smooth_interpolates_between_anchors():
    from heightforge.grid import Grid
    from heightforge.noise import smooth_noise

    values = np.zeros((4, 4))
    values[0, 0] = 1.0
    smoothed = smooth_noise(Grid(values), 1)

    # Anchors keep their value, halfway cells take the average
    assert smoothed.at(0, 0) == 1.0
    assert smoothed.at(1, 0) == 0.5
    assert smoothed.at(0, 1) == 0.5
    assert smoothed.at(1, 1) == 0.25
    # Row 3 blends anchor row 2 with row 0 wrapped around
    assert smoothed.at(3, 0) == 0.5


def test_smooth_does_not_mutate_base():
    from heightforge.noise import smooth_noise, white_noise
    noise = white_noise(8, 8)
    before = noise.to_array()
    smooth_noise(noise, 3)
    np.testing.assert_array_equal(noise.values, before)


@pytest.mark.parametrize("octave", [-1, 63, 100])
def test_smooth_rejects_out_of_range_octave(octave):
    from heightforge.grid import InvalidConfig
    from heightforge.noise import smooth_noise, white_noise
    with pytest.raises(InvalidConfig):
        smooth_noise(white_noise(4, 4), octave)


def test_smooth_accepts_max_octave():
    from heightforge.noise import MAX_OCTAVE, smooth_noise, white_noise
    noise = white_noise(4, 4)
    smoothed = smooth_noise(noise, MAX_OCTAVE)
    assert smoothed.shape == (4, 4)
    assert smoothed.at(0, 0) == noise.at(0, 0)


def test_blend_constant_octaves():
    from heightforge.grid import Grid
    from heightforge.noise import blend_octaves

    base = Grid.with_dimensions(6, 4)
    octaves = [Grid.with_dimensions(6, 4, fill=0.42) for _ in range(7)]
    blended = blend_octaves(base, octaves)
    assert blended.shape == (4, 6)
    np.testing.assert_allclose(blended.values, 0.42, atol=1e-9)


def test_blend_weights_first_octave_most():
    from heightforge.grid import Grid
    from heightforge.noise import blend_octaves

    base = Grid.with_dimensions(2, 2)
    octaves = [Grid.with_dimensions(2, 2, fill=0.0),
               Grid.with_dimensions(2, 2, fill=1.0)]
    blended = blend_octaves(base, octaves)
    # Weights 0.5 and 0.25, normalized by 0.75
    np.testing.assert_allclose(blended.values, 1.0 / 3.0)


def test_blend_rejects_mismatched_octave():
    from heightforge.grid import Grid, InvalidDimension
    from heightforge.noise import blend_octaves

    base = Grid.with_dimensions(4, 3)
    with pytest.raises(InvalidDimension):
        blend_octaves(base, [Grid.with_dimensions(3, 4)])


def test_blend_rejects_empty_octaves():
    from heightforge.grid import Grid, InvalidConfig
    from heightforge.noise import blend_octaves
    with pytest.raises(InvalidConfig):
        blend_octaves(Grid.with_dimensions(2, 2), [])


@pytest.mark.parametrize("persistence", [0.0, float("nan"), float("inf")])
def test_blend_rejects_bad_persistence(persistence):
    from heightforge.grid import Grid, InvalidConfig
    from heightforge.noise import blend_octaves

    base = Grid.with_dimensions(2, 2)
    with pytest.raises(InvalidConfig):
        blend_octaves(base, [base], persistence=persistence)


def test_seed_rejects_bool_words():
    from heightforge.grid import InvalidConfig
    from heightforge.noise import white_noise
    with pytest.raises(InvalidConfig):
        white_noise(4, 4, seed=(0, 0, False, 0))
