import random

import pytest

from cogsuite.games.config import MAZE_LEVELS
from cogsuite.games.errors import MazeGenerationExhausted
from cogsuite.games.maze import generate_maze, generate_playable_maze, place_walls, start_cell
from cogsuite.games.reachability import reachable


def test_zero_walls_solved_on_first_attempt():
    result = generate_maze(3, 0, rng=random.Random(1))
    assert result.solved
    assert result.attempts == 1
    inst = result.instance
    assert inst.walls == frozenset()
    assert inst.start == (2, 0)
    assert inst.key != inst.start and inst.door != inst.start and inst.key != inst.door


@pytest.mark.parametrize("level", MAZE_LEVELS, ids=lambda lvl: lvl.name)
def test_solved_mazes_are_solvable(level):
    for seed in range(25):
        result = generate_maze(level.grid_size, level.wall_count, rng=random.Random(seed))
        assert result.solved, f"seed {seed}"
        inst = result.instance
        assert len(inst.walls) <= level.wall_count
        assert reachable(inst.grid_size, inst.walls, inst.start, inst.key)
        assert reachable(inst.grid_size, inst.walls, inst.key, inst.door)


def test_same_seed_same_maze():
    a = generate_maze(5, 12, rng=random.Random(99)).instance
    b = generate_maze(5, 12, rng=random.Random(99)).instance
    assert a == b


def test_fully_walled_grid_exhausts():
    # 2x2 has four interior edges; walling all of them isolates every cell
    result = generate_maze(2, 4, rng=random.Random(3), max_attempts=5, placement_tries=1000)
    assert not result.solved
    assert result.attempts == 5
    assert result.metrics["exhausted"] is True
    assert result.metrics["candidates_rejected"] == 5
    assert not result.instance.is_solvable()


def test_playable_maze_relaxes_wall_count():
    result = generate_playable_maze(2, 4, rng=random.Random(3), max_attempts=5, placement_tries=1000)
    assert result.solved
    assert result.instance.is_solvable()
    assert len(result.instance.walls) < 4
    assert result.metrics["walls_relaxed_from"] == 4


def test_strict_generation_raises():
    with pytest.raises(MazeGenerationExhausted) as exc:
        generate_playable_maze(2, 4, rng=random.Random(3), max_attempts=5, placement_tries=1000, strict=True)
    assert exc.value.status == 503
    assert exc.value.to_dict()["code"] == "maze_ungenerable"


def test_place_walls_respects_try_budget():
    metrics = {"placement_tries": 0}
    walls = place_walls(5, 200, random.Random(0), max_tries=30, metrics=metrics)
    assert metrics["placement_tries"] == 30
    assert len(walls) <= 30


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generate_maze(1, 0)
    with pytest.raises(ValueError):
        generate_maze(3, -1)
    assert start_cell(4) == (3, 0)
