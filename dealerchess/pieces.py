"""Concrete chess pieces and their move generation."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from dealerchess.board import CellIndex, ChessBoard, ChessPiece, ChessPieceStep, PieceColor

_DIAGONALS: Tuple[CellIndex, ...] = (
    CellIndex(1, -1),
    CellIndex(1, 1),
    CellIndex(-1, -1),
    CellIndex(-1, 1),
)

_ORTHOGONALS: Tuple[CellIndex, ...] = (
    CellIndex(1, 0),
    CellIndex(0, -1),
    CellIndex(0, 1),
    CellIndex(-1, 0),
)

_ALL_DIRECTIONS: Tuple[CellIndex, ...] = (
    CellIndex(1, -1),
    CellIndex(1, 0),
    CellIndex(1, 1),
    CellIndex(0, -1),
    CellIndex(0, 1),
    CellIndex(-1, -1),
    CellIndex(-1, 0),
    CellIndex(-1, 1),
)

_KNIGHT_JUMPS: Tuple[CellIndex, ...] = (
    CellIndex(2, 1),
    CellIndex(1, 2),
    CellIndex(-1, 2),
    CellIndex(-2, 1),
    CellIndex(-2, -1),
    CellIndex(-1, -2),
    CellIndex(1, -2),
    CellIndex(2, -1),
)


class _Slider(ChessPiece):
    """A piece that moves any distance along a set of directions."""

    _directions: Tuple[CellIndex, ...] = ()

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        moves: List[ChessPieceStep] = []
        for direction in self._directions:
            target = self.current_cell
            while True:
                target = target + direction
                step = self._step_to(board, target)
                if step is not None:
                    moves.append(step)
                if not self._can_pass_through(board, target):
                    break
        return moves


class _Jumper(ChessPiece):
    """A piece that moves to fixed offsets from its cell."""

    _offsets: Tuple[CellIndex, ...] = ()

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        targets: Iterable[CellIndex] = (self.current_cell + offset for offset in self._offsets)
        return [step for step in (self._step_to(board, t) for t in targets) if step is not None]


def _letter(piece: ChessPiece, white: str) -> str:
    return white if piece.color is PieceColor.WHITE else white.lower()


class Bishop(_Slider):
    """Moves diagonally any distance."""

    _directions = _DIAGONALS

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        return super().legal_moves(board)

    def relative_value(self) -> float:
        return 3.0

    def log_view(self) -> str:
        return _letter(self, "B")


class Rook(_Slider):
    """Moves along rows and columns any distance."""

    _directions = _ORTHOGONALS

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        return super().legal_moves(board)

    def relative_value(self) -> float:
        return 5.0

    def log_view(self) -> str:
        return _letter(self, "R")


class Queen(_Slider):
    """Moves in all eight directions any distance."""

    _directions = _ALL_DIRECTIONS

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        return super().legal_moves(board)

    def relative_value(self) -> float:
        return 9.0

    def log_view(self) -> str:
        return _letter(self, "Q")


class King(_Jumper):
    """Moves one cell in any direction."""

    _offsets = _ALL_DIRECTIONS

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        return super().legal_moves(board)

    def relative_value(self) -> float:
        return 999.0

    def log_view(self) -> str:
        return _letter(self, "K")


class Knight(_Jumper):
    """Jumps in an L shape."""

    _offsets = _KNIGHT_JUMPS

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        return super().legal_moves(board)

    def relative_value(self) -> float:
        return 3.0

    def log_view(self) -> str:
        return _letter(self, "N")


class Pawn(ChessPiece):
    """White pawns advance towards increasing Y, black towards decreasing Y."""

    def legal_moves(self, board: ChessBoard) -> List[ChessPieceStep]:
        forward = 1 if self.color is PieceColor.WHITE else -1
        moves: List[ChessPieceStep] = []
        for side in (-1, 1):
            target = self.current_cell + CellIndex(forward, side)
            if board.is_valid_cell(target) and board[target].can_step_on:
                occupant = board[target].current_piece
                if occupant is not None and occupant.color != self.color:
                    moves.append(ChessPieceStep(self.current_cell, target, occupant))
        ahead = self.current_cell + CellIndex(forward, 0)
        if self._can_pass_through(board, ahead):
            moves.append(ChessPieceStep(self.current_cell, ahead, None))
        return moves

    def relative_value(self) -> float:
        return 1.0

    def log_view(self) -> str:
        return _letter(self, "P")