"""Board model used by the chess move search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


class PieceColor(Enum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1


@dataclass(frozen=True)
class CellIndex:
    """Cell coordinates on the search board, row first."""

    y: int
    x: int

    def __add__(self, other: "CellIndex") -> "CellIndex":
        if not isinstance(other, CellIndex):
            return NotImplemented
        return CellIndex(self.y + other.y, self.x + other.x)


@dataclass(frozen=True)
class ChessPieceStep:
    """A move of a piece, with the piece it captures if any."""

    previous_position: CellIndex
    new_position: CellIndex
    attacked_piece: Optional["ChessPiece"] = None

    def step_score(self) -> float:
        """Value of the captured piece, or 0 for a quiet move."""
        if self.attacked_piece is None:
            return 0.0
        return float(self.attacked_piece.relative_value())


UNABLE_MOVE = ChessPieceStep(CellIndex(0, 0), CellIndex(0, 0), None)


@dataclass
class SquareInfo:
    """Contents of one board cell."""

    current_piece: Optional["ChessPiece"] = None
    can_step_on: bool = True


class ChessPiece:
    """Base of all pieces: a colour, a cell and move generation."""

    def __init__(
        self,
        color: PieceColor = PieceColor.WHITE,
        cell: Optional[CellIndex] = None,
    ) -> None:
        self.color = color
        self.current_cell = cell if cell is not None else CellIndex(0, 0)
        # Marks a piece captured during search.
        self.is_dead = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name}, {self.current_cell})"

    def legal_moves(self, board: "ChessBoard") -> List[ChessPieceStep]:
        """Moves available to this piece on ``board``."""
        return []

    def relative_value(self) -> float:
        """Material value of the piece."""
        return 0.0

    def log_view(self) -> str:
        """One-character board rendering of the piece."""
        return "none"

    def _can_pass_through(self, board: "ChessBoard", cell: CellIndex) -> bool:
        return (
            board.is_valid_cell(cell)
            and board[cell].current_piece is None
            and board[cell].can_step_on
        )

    def _step_to(self, board: "ChessBoard", target: CellIndex) -> Optional[ChessPieceStep]:
        if not board.is_valid_cell(target) or not board[target].can_step_on:
            return None
        occupant = board[target].current_piece
        if occupant is None:
            return ChessPieceStep(self.current_cell, target, None)
        if occupant.color != self.color:
            return ChessPieceStep(self.current_cell, target, occupant)
        return None


class ChessBoard:
    """A rectangular grid of squares plus the pieces of each side."""

    def __init__(self, size_y: int = 0, size_x: int = 0) -> None:
        self.white_pieces: List[ChessPiece] = []
        self.black_pieces: List[ChessPiece] = []
        self._rows: List[List[SquareInfo]] = []
        self.init(size_y, size_x)

    def init(self, size_y: int, size_x: int) -> None:
        """Reset to an empty board of the given size."""
        if size_y < 0 or size_x < 0:
            raise ValueError(f"invalid board size {size_y}x{size_x}")
        self.white_pieces.clear()
        self.black_pieces.clear()
        self._size_y = size_y
        self._size_x = size_x
        self._rows = [[SquareInfo() for _ in range(size_x)] for _ in range(size_y)]

    @property
    def size_y(self) -> int:
        return self._size_y

    @property
    def size_x(self) -> int:
        return self._size_x

    def is_valid_cell(self, cell: CellIndex) -> bool:
        """True if ``cell`` lies on the board."""
        return 0 <= cell.y < self._size_y and 0 <= cell.x < self._size_x

    def square(self, cell: CellIndex) -> SquareInfo:
        """The square at ``cell``."""
        if not self.is_valid_cell(cell):
            raise IndexError(f"cell {cell} is outside the board")
        return self._rows[cell.y][cell.x]

    def __getitem__(self, key: Union[int, CellIndex]):
        if isinstance(key, CellIndex):
            return self.square(key)
        if not 0 <= key < self._size_y:
            raise IndexError(f"row {key} is outside the board")
        return self._rows[key]

    def set(self, y: int, x: int, piece: ChessPiece) -> None:
        """Place ``piece`` at (y, x) and register it with its side."""
        square = self.square(CellIndex(y, x))
        if not square.can_step_on:
            logger.warning("the chess piece is placed on a place inaccessible for a move")
        square.current_piece = piece
        piece.current_cell = CellIndex(y, x)
        side = self.white_pieces if piece.color is PieceColor.WHITE else self.black_pieces
        if not any(existing is piece for existing in side):
            side.append(piece)

    def set_cell_accessibility(self, y: int, x: int, value: bool) -> None:
        """Mark whether pieces may step on (y, x)."""
        square = self.square(CellIndex(y, x))
        if square.current_piece is not None and not value:
            logger.warning(
                "the square containing the chess piece has become unavailable for a move"
            )
        square.can_step_on = value