from cogsuite.games.cells import Direction, neighbors, parse_direction
from cogsuite.games.reachability import reachable, reachable_cells
from cogsuite.games.walls import canonical_edge_key


def test_open_grid_fully_reachable():
    assert len(reachable_cells(4, set(), (3, 0))) == 16
    assert reachable(4, set(), (3, 0), (0, 3))


def test_walled_corner_is_cut_off():
    walls = {canonical_edge_key((0, 0), (0, 1)), canonical_edge_key((0, 0), (1, 0))}
    assert not reachable(3, walls, (2, 0), (0, 0))
    assert reachable_cells(3, walls, (0, 0)) == {(0, 0)}
    assert reachable(3, walls, (0, 0), (0, 0))


def test_out_of_bounds_is_unreachable():
    assert not reachable(3, set(), (2, 0), (3, 0))
    assert reachable_cells(3, set(), (-1, 0)) == set()


def test_neighbors_and_direction_aliases():
    assert set(neighbors((0, 0), 3)) == {(0, 1), (1, 0)}
    assert parse_direction("ArrowUp") is Direction.UP
    assert parse_direction(" l ") is Direction.LEFT
    assert Direction.RIGHT.opposite is Direction.LEFT
