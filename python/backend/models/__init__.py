from backend.models.errors import IllegalMove, InvalidConfiguration, PuzzleError
from backend.models.position import Direction, Position
from backend.models.puzzle import BOARD_SIZE, Piece, PuzzleState

__all__ = [
    "BOARD_SIZE",
    "Direction",
    "IllegalMove",
    "InvalidConfiguration",
    "Piece",
    "Position",
    "PuzzleError",
    "PuzzleState",
]
