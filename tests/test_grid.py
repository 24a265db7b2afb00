import random

import pytest

from graphkit.grid import (
    capture_surrounded,
    count_enclaves,
    flood_fill,
    minimum_effort_path,
    nearest_zero_distances,
    oranges_rotting,
)


def _random_grid(rng, rows, cols, values):
    return [[rng.choice(values) for _ in range(cols)] for _ in range(rows)]


def _adjacent(r, c, rows, cols):
    for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


@pytest.mark.parametrize("seed", range(5))
def test_nearest_zero_satisfies_local_rule(seed):
    rng = random.Random(seed)
    mat = _random_grid(rng, 6, 7, [0, 1, 1])
    mat[0][0] = 0
    dist = nearest_zero_distances(mat)
    assert len(dist) == 6 and all(len(row) == 7 for row in dist)
    for r in range(6):
        for c in range(7):
            if mat[r][c] == 0:
                assert dist[r][c] == 0
            else:
                assert dist[r][c] == 1 + min(
                    dist[nr][nc] for nr, nc in _adjacent(r, c, 6, 7)
                )


def test_nearest_zero_without_zeros_stays_zero():
    assert nearest_zero_distances([[1, 1], [1, 1]]) == [[0, 0], [0, 0]]


def test_flood_fill_does_not_mutate_input():
    image = [[1, 1, 0], [1, 0, 1], [1, 1, 1]]
    snapshot = [row[:] for row in image]
    flood_fill(image, 0, 0, 5)
    assert image == snapshot


def test_flood_fill_region_invariant():
    image = [[1, 1, 0], [1, 0, 1], [0, 1, 1]]
    result = flood_fill(image, 0, 0, 7)
    assert result[0][0] == 7 and result[0][1] == 7 and result[1][0] == 7
    # cells not connected to the start keep their colour
    assert result[1][2] == image[1][2]
    assert result[2][2] == image[2][2]
    assert result[0][2] == image[0][2]


def test_flood_fill_same_colour_is_identity():
    image = [[2, 2], [2, 3]]
    assert flood_fill(image, 0, 0, 2) == image


def test_flood_fill_out_of_range():
    with pytest.raises(IndexError):
        flood_fill([[1]], 1, 0, 2)


def test_count_enclaves_border_land_escapes():
    grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    assert count_enclaves(grid) == 0


def test_count_enclaves_isolated_centre():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert count_enclaves(grid) == 1


@pytest.mark.parametrize("seed", range(5))
def test_count_enclaves_bounded_by_land(seed):
    rng = random.Random(seed)
    grid = _random_grid(rng, 5, 6, [0, 1])
    land = sum(map(sum, grid))
    assert 0 <= count_enclaves(grid) <= land


def test_oranges_no_fresh():
    assert oranges_rotting([[0, 2], [2, 0]]) == 0


def test_oranges_unreachable():
    assert oranges_rotting([[2, 0, 1]]) == -1


def test_oranges_chain():
    assert oranges_rotting([[2, 1, 1]]) == 2


def test_capture_centre_cell():
    board = [list("XXX"), list("XOX"), list("XXX")]
    assert capture_surrounded(board) is None
    assert board == [list("XXX"), list("XXX"), list("XXX")]


def test_capture_keeps_border_region():
    board = [list("XOX"), list("XOX"), list("XXX")]
    capture_surrounded(board)
    assert board == [list("XOX"), list("XOX"), list("XXX")]


def test_minimum_effort_flat_grid():
    assert minimum_effort_path([[4, 4], [4, 4]]) == 0


def test_minimum_effort_single_step():
    assert minimum_effort_path([[1, 10]]) == 9


@pytest.mark.parametrize("seed", range(5))
def test_minimum_effort_not_worse_than_fixed_path(seed):
    rng = random.Random(seed)
    heights = _random_grid(rng, 4, 5, list(range(20)))
    path = [(0, c) for c in range(5)] + [(r, 4) for r in range(1, 4)]
    fixed = max(
        abs(heights[a[0]][a[1]] - heights[b[0]][b[1]]) for a, b in zip(path, path[1:])
    )
    assert 0 <= minimum_effort_path(heights) <= fixed