"""Static difficulty configuration consumed by the generators and sessions."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class MazeLevel:
    id: int
    name: str
    grid_size: int
    wall_count: int
    time_limit: int  # seconds, challenge mode only

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "grid_size": self.grid_size,
            "wall_count": self.wall_count,
            "time_limit": self.time_limit,
        }


MAZE_LEVELS: List[MazeLevel] = [
    MazeLevel(id=1, name="Easy", grid_size=3, wall_count=2, time_limit=60),
    MazeLevel(id=2, name="Medium", grid_size=4, wall_count=6, time_limit=90),
    MazeLevel(id=3, name="Hard", grid_size=5, wall_count=12, time_limit=120),
]

# Rejection sampling bounds for maze generation
MAZE_MAX_ATTEMPTS = 500
MAZE_WALL_PLACEMENT_TRIES = 100

# Path puzzle: level thresholds -> grid size, grid size -> assessment seconds
PATH_SIZE_THRESHOLDS = [(20, 5), (10, 4)]
PATH_BASE_SIZE = 3
PATH_TIME_LIMITS = {3: 60, 4: 90, 5: 120}
PATH_PRACTICE_START_LEVEL = 1
PATH_ASSESSMENT_START_LEVEL = 2

# Bubble sort
BUBBLE_QUESTION_SECONDS = 15
BUBBLE_QUESTIONS_PER_SECTION = 2
BUBBLE_PRACTICE_DIFFICULTY = 1
BUBBLE_ASSESSMENT_DIFFICULTY = 2


def path_grid_size(level: int) -> int:
    for threshold, size in PATH_SIZE_THRESHOLDS:
        if level > threshold:
            return size
    return PATH_BASE_SIZE


def path_time_limit(grid_size: int) -> int:
    return PATH_TIME_LIMITS.get(grid_size, PATH_TIME_LIMITS[max(PATH_TIME_LIMITS)])


def levels_payload():
    """Return the full static configuration as plain data for the client."""
    return {
        "maze": [lvl.to_dict() for lvl in MAZE_LEVELS],
        "path": {
            "base_size": PATH_BASE_SIZE,
            "size_thresholds": [{"level_above": t, "grid_size": s} for t, s in PATH_SIZE_THRESHOLDS],
            "time_limits": {str(k): v for k, v in PATH_TIME_LIMITS.items()},
        },
        "bubble": {
            "question_seconds": BUBBLE_QUESTION_SECONDS,
            "questions_per_section": BUBBLE_QUESTIONS_PER_SECTION,
        },
    }


__all__ = [
    "MazeLevel",
    "MAZE_LEVELS",
    "MAZE_MAX_ATTEMPTS",
    "MAZE_WALL_PLACEMENT_TRIES",
    "PATH_TIME_LIMITS",
    "path_grid_size",
    "path_time_limit",
    "levels_payload",
]
