import copy

import pytest

from dailyalgos.matrix import maximal_square, min_path_sum, rotate_image, set_zeroes


@pytest.mark.parametrize(
    "matrix",
    [[[1, 2, 3], [4, 5, 6], [7, 8, 9]], [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]], [[1]]],
)
def test_rotate_image_clockwise(matrix):
    original = copy.deepcopy(matrix)
    rotated = rotate_image(matrix)
    n = len(original)
    for i, row in enumerate(original):
        for j, value in enumerate(row):
            assert rotated[j][n - 1 - i] == value


def test_rotate_image_four_turns_is_identity():
    original = [[1, 2], [3, 4]]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate_image(matrix)
    assert matrix == original


def test_rotate_image_non_square_raises():
    with pytest.raises(ValueError):
        rotate_image([[1, 2, 3], [4, 5, 6]])


@pytest.mark.parametrize(
    "matrix",
    [[[1, 1, 1], [1, 0, 1], [1, 1, 1]], [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]], [[1, 2], [3, 4]]],
)
def test_set_zeroes_invariant(matrix):
    original = copy.deepcopy(matrix)
    result = set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_maximal_square_worked_example():
    matrix = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    assert maximal_square(matrix) == 4


@pytest.mark.parametrize("size", [1, 2, 5])
def test_maximal_square_all_ones(size):
    matrix = [["1"] * size for _ in range(size)]
    assert maximal_square(matrix) == size * size


def test_maximal_square_all_zeros():
    assert maximal_square([["0", "0"], ["0", "0"]]) == 0


def test_min_path_sum_worked_example():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    assert min_path_sum(grid) == 7


def test_min_path_sum_does_not_mutate():
    grid = [[1, 2, 3], [4, 5, 6]]
    original = copy.deepcopy(grid)
    min_path_sum(grid)
    assert grid == original


def test_min_path_sum_single_row_and_column():
    row = [3, 1, 4, 1, 5]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[v] for v in row]) == sum(row)


def test_min_path_sum_empty_raises():
    with pytest.raises(ValueError):
        min_path_sum([])