import math

import pytest

from algonotes.graphs import (
    calc_equation,
    can_visit_all_rooms,
    find_circle_num,
    min_reorder,
    nearest_exit,
    oranges_rotting,
)


def test_min_reorder_source_case():
    assert min_reorder(5, [[1, 0], [1, 2], [3, 2], [3, 4]]) == 2


def test_min_reorder_all_roads_toward_zero():
    roads = [[1, 0], [2, 1], [3, 1], [4, 3]]
    assert min_reorder(5, roads) == 0


def test_min_reorder_all_roads_away_from_zero():
    roads = [[0, 1], [1, 2], [1, 3], [3, 4]]
    assert min_reorder(5, roads) == len(roads)


def test_min_reorder_single_city():
    assert min_reorder(1, []) == 0


def test_min_reorder_rejects_no_cities():
    with pytest.raises(ValueError):
        min_reorder(0, [])


def test_nearest_exit_example():
    maze = [["+", "+", ".", "+"], [".", ".", ".", "+"], ["+", "+", "+", "."]]
    assert nearest_exit(maze, [1, 2]) == 1


def test_nearest_exit_does_not_modify_maze():
    maze = [["+", "+", ".", "+"], [".", ".", ".", "+"], ["+", "+", "+", "."]]
    snapshot = [row[:] for row in maze]
    nearest_exit(maze, [1, 2])
    assert maze == snapshot


def test_nearest_exit_walled_in():
    maze = [["+", "+", "+"], ["+", ".", "+"], ["+", "+", "+"]]
    assert nearest_exit(maze, [1, 1]) == -1


def test_nearest_exit_entrance_is_not_an_exit():
    maze = [[".", "+"], ["+", "+"]]
    assert nearest_exit(maze, [0, 0]) == -1


@pytest.mark.parametrize("col", [1, 2, 3, 4, 5])
def test_nearest_exit_corridor(col):
    width = 7
    maze = [list("+" * width), list("." * width), list("+" * width)]
    assert nearest_exit(maze, [1, col]) == min(col, width - 1 - col)


EQUATIONS = [["x1", "x2"], ["x2", "x3"], ["x3", "x4"], ["x4", "x5"]]
VALUES = [3.0, 4.0, 5.0, 6.0]


def test_calc_equation_source_case():
    queries = [["x1", "x5"], ["x5", "x2"], ["x2", "x4"], ["x2", "x2"], ["x2", "x9"], ["x9", "x9"]]
    result = calc_equation(EQUATIONS, VALUES, queries)
    assert result[0] == pytest.approx(math.prod(VALUES))
    assert result[1] == pytest.approx(1 / math.prod(VALUES[1:]))
    assert result[2] == pytest.approx(VALUES[1] * VALUES[2])
    assert result[3] == 1.0
    assert result[4] == -1.0
    assert result[5] == -1.0


def test_calc_equation_reciprocal_queries():
    forward, backward = calc_equation(EQUATIONS, VALUES, [["x1", "x4"], ["x4", "x1"]])
    assert forward * backward == pytest.approx(1.0)


def test_calc_equation_disconnected_components():
    equations = [["a", "b"], ["c", "d"]]
    assert calc_equation(equations, [2.0, 3.0], [["a", "d"]]) == [-1.0]


def test_calc_equation_direct_value():
    assert calc_equation([["a", "b"]], [2.5], [["a", "b"]]) == [2.5]


def test_find_circle_num_source_case():
    grid = [[1, 0, 0, 1], [0, 1, 1, 0], [0, 1, 1, 1], [1, 0, 1, 1]]
    assert find_circle_num(grid) == 1


def test_find_circle_num_isolated_cities():
    size = 4
    grid = [[int(i == j) for j in range(size)] for i in range(size)]
    assert find_circle_num(grid) == size


def test_find_circle_num_fully_connected():
    assert find_circle_num([[1] * 3 for _ in range(3)]) == 1


def test_find_circle_num_two_groups():
    grid = [[1, 1, 0], [1, 1, 0], [0, 0, 1]]
    assert find_circle_num(grid) == 2


def test_can_visit_all_rooms_chain():
    assert can_visit_all_rooms([[1], [2], [3], []]) is True


def test_can_visit_all_rooms_locked_room():
    assert can_visit_all_rooms([[1, 3], [3, 0, 1], [2], [0]]) is False


def test_can_visit_all_rooms_rejects_empty():
    with pytest.raises(ValueError):
        can_visit_all_rooms([])


@pytest.mark.parametrize("fresh", [1, 3, 6])
def test_oranges_rotting_row(fresh):
    assert oranges_rotting([[2] + [1] * fresh]) == fresh


def test_oranges_rotting_unreachable():
    assert oranges_rotting([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) == -1


def test_oranges_rotting_nothing_fresh():
    assert oranges_rotting([[0, 2]]) == 0


def test_oranges_rotting_no_rotten_with_fresh():
    assert oranges_rotting([[1, 0]]) == -1


def test_oranges_rotting_keeps_grid():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    snapshot = [row[:] for row in grid]
    oranges_rotting(grid)
    assert grid == snapshot