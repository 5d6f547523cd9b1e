import pytest

from olymp.multivector import multi_vector


def test_shape_and_fill():
    grid = multi_vector(2, 3, fill=7)
    assert len(grid) == 2
    assert all(len(row) == 3 for row in grid)
    assert all(item == 7 for row in grid for item in row)


def test_one_dimension_default_fill():
    assert multi_vector(4) == [0, 0, 0, 0]


def test_three_dimensions():
    cube = multi_vector(2, 3, 4, fill=1)
    assert len(cube) == 2
    assert len(cube[0]) == 3
    assert len(cube[1][2]) == 4
    assert sum(x for plane in cube for row in plane for x in row) == 2 * 3 * 4


def test_rows_are_independent():
    grid = multi_vector(3, 2)
    grid[0][0] = 5
    assert grid[1][0] == 0
    assert grid[2][0] == 0


def test_mutable_fill_is_copied():
    grid = multi_vector(2, 2, fill=[])
    grid[0][0].append(1)
    assert grid[0][1] == []
    assert grid[1][0] == []


def test_zero_size():
    assert multi_vector(0, 5) == []


def test_no_dimensions_rejected():
    with pytest.raises(ValueError):
        multi_vector()


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        multi_vector(2, -1)