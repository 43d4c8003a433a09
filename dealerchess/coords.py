"""Conversions between game and search coordinates, and piece construction."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from dealerchess.board import CellIndex, ChessPiece, PieceColor
from dealerchess.index2d import Index2D
from dealerchess.pieces import Bishop, King, Knight, Pawn, Queen, Rook


class ChessManType(Enum):
    """Kind of chess piece used in the game."""

    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


_PIECE_CLASSES = {
    ChessManType.BISHOP: Bishop,
    ChessManType.KNIGHT: Knight,
    ChessManType.PAWN: Pawn,
    ChessManType.QUEEN: Queen,
    ChessManType.ROOK: Rook,
    ChessManType.KING: King,
}


def construct_piece(kind: ChessManType, color: PieceColor) -> Optional[ChessPiece]:
    """Build a search piece of the given kind and colour, or None for an unknown kind."""
    cls = _PIECE_CLASSES.get(kind)
    if cls is None:
        return None
    return cls(color)


def game_to_ai(index: Index2D) -> Index2D:
    """Convert game coordinates to search coordinates by swapping the axes."""
    return Index2D(index.y, index.x)


def ai_to_game(cell: CellIndex) -> CellIndex:
    """Convert search coordinates back to game coordinates, undoing ``game_to_ai``."""
    return CellIndex(cell.x, cell.y)