"""Per-player game sessions driven by discrete events."""

from .base import GameSession, Transition  # noqa: F401
from .bubble_session import BubblePhase, BubbleSession  # noqa: F401
from .events import (  # noqa: F401
    Advance,
    CheckPath,
    Move,
    NextLevel,
    NextPuzzle,
    Retry,
    Retype,
    Rotate,
    SelectBubble,
    SelectTile,
    StartMaze,
    StartPath,
    Tick,
    build_event,
)
from .maze_session import MazeSession  # noqa: F401
from .path_session import PathSession  # noqa: F401
from .registry import SessionRegistry, registry  # noqa: F401
