import pytest

from cogsuite.games.walls import add_wall, canonical_edge_key, edge_to_str, is_blocked, walls_to_list


def test_canonical_key_is_orientation_free():
    assert canonical_edge_key((1, 2), (1, 1)) == canonical_edge_key((1, 1), (1, 2))
    assert canonical_edge_key((2, 0), (1, 0)) == ((1, 0), (2, 0))


def test_non_adjacent_cells_rejected():
    with pytest.raises(ValueError):
        canonical_edge_key((0, 0), (1, 1))
    with pytest.raises(ValueError):
        canonical_edge_key((0, 0), (0, 0))


def test_add_wall_reports_duplicates():
    walls = set()
    assert add_wall(walls, (0, 0), (0, 1)) is True
    assert add_wall(walls, (0, 1), (0, 0)) is False
    assert len(walls) == 1
    assert is_blocked(walls, (0, 1), (0, 0))
    assert not is_blocked(walls, (0, 0), (1, 0))


def test_edge_string_form():
    key = canonical_edge_key((2, 1), (1, 1))
    assert edge_to_str(key) == "1,1-2,1"
    assert walls_to_list({canonical_edge_key((0, 1), (0, 0)), key}) == ["0,0-0,1", "1,1-2,1"]


def test_out_of_grid_edges_rejected():
    walls = set()
    with pytest.raises(ValueError):
        add_wall(walls, (-1, 0), (0, 0))
    with pytest.raises(ValueError):
        canonical_edge_key((2, 2), (2, 3), size=3)
    with pytest.raises(ValueError):
        add_wall(walls, (3, 0), (2, 0), size=3)
    assert walls == set()
    assert canonical_edge_key((2, 1), (2, 2), size=3) == ((2, 1), (2, 2))
