"""Exception types raised by the game core and session layer.

Expected gameplay outcomes (blocked moves, incomplete paths) are returned as
data; these exceptions cover actions a client must not send in the current
state and the strict-mode maze generation failure.
"""


class GameError(Exception):
    code = "game_error"
    status = 400

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class InvalidActionError(GameError):
    code = "invalid_action"
    status = 409


class MazeGenerationExhausted(GameError):
    code = "maze_ungenerable"
    status = 503

    def __init__(self, grid_size: int, wall_count: int, attempts: int):
        super().__init__(
            f"no solvable {grid_size}x{grid_size} maze with {wall_count} walls after {attempts} attempts"
        )
        self.grid_size = grid_size
        self.wall_count = wall_count
        self.attempts = attempts
