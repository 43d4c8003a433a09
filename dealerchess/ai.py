"""Move search for the computer-controlled side."""

from __future__ import annotations

import logging
import random
import sys
import threading
from typing import Callable, List, Optional, Sequence, Tuple

from dealerchess.board import (
    UNABLE_MOVE,
    ChessBoard,
    ChessPiece,
    ChessPieceStep,
    PieceColor,
)

logger = logging.getLogger(__name__)

# Bonus for a white piece reaching the last two rows of the board.
LAST_LINE_BONUS = 10
# Black pieces do not step further than this many rows behind the first white piece.
MAX_FIGURES_INTERVAL = 100
# Weight of the opponent's best reply at each deeper search level.
DEPTH_COEFFICIENT = 0.999

_LOWEST_SCORE = -sys.float_info.max


def is_unable_move(step: ChessPieceStep) -> bool:
    """True if ``step`` is the marker for "no move available"."""
    return step == UNABLE_MOVE


def get_next_step(board: ChessBoard, color: PieceColor, depth: int) -> ChessPieceStep:
    """Best move for ``color`` found by searching ``depth`` plies ahead.

    Returns ``UNABLE_MOVE`` when there are no white pieces or no move exists.
    """
    white_pieces = list(board.white_pieces)
    black_pieces = list(board.black_pieces)

    if not white_pieces:
        return UNABLE_MOVE

    if color is PieceColor.WHITE:
        step, _ = _best_step(board, white_pieces, black_pieces, depth)
        return step

    step, score = _best_step(board, black_pieces, white_pieces, depth)
    logger.debug("best black score: %f", score)
    return step


def get_next_step_async(
    board: ChessBoard,
    color: PieceColor,
    depth: int,
    callback: Optional[Callable[[ChessPieceStep], None]],
) -> threading.Thread:
    """Search in a background thread and hand the result to ``callback``.

    Returns the started thread so the caller may join it.
    """

    def work() -> None:
        result = get_next_step(board, color, depth)
        if callback is not None:
            callback(result)

    thread = threading.Thread(target=work, name="chess-ai-search", daemon=True)
    thread.start()
    return thread


def render_board(board: ChessBoard) -> str:
    """Text picture of the board, one line per row, blanks for empty cells."""
    lines = []
    for y in range(board.size_y):
        lines.append(
            "".join(
                square.current_piece.log_view() if square.current_piece is not None else " "
                for square in board[y]
            )
        )
    return "\n".join(lines)


def log_chess_board(board: ChessBoard) -> None:
    """Write the board picture to the log, followed by a separator line."""
    if board.size_y:
        for line in render_board(board).split("\n"):
            logger.warning("%s", line)
    logger.warning("---------------------")


def do_step(step: ChessPieceStep, board: ChessBoard) -> None:
    """Play ``step`` on ``board`` for good, removing any captured piece."""
    piece = board[step.previous_position].current_piece
    if piece is None:
        raise ValueError("invalid step: no piece on its starting cell")
    board[step.previous_position].current_piece = None
    board.set(step.new_position.y, step.new_position.x, piece)

    captured = step.attacked_piece
    if captured is not None:
        side = board.white_pieces if captured.color is PieceColor.WHITE else board.black_pieces
        side[:] = [p for p in side if p is not captured]


def _best_step(
    board: ChessBoard,
    attacking: Sequence[ChessPiece],
    defensive: Sequence[ChessPiece],
    depth: int,
) -> Tuple[ChessPieceStep, float]:
    best_score = _LOWEST_SCORE
    result = UNABLE_MOVE
    depth -= 1

    for figure in attacking:
        if figure.is_dead:
            continue

        steps: List[ChessPieceStep] = list(figure.legal_moves(board))
        for step in steps:
            if (
                figure.color is PieceColor.BLACK
                and defensive
                and defensive[0].current_cell.y - step.new_position.y > MAX_FIGURES_INTERVAL
            ):
                continue

            score = step.step_score()

            if figure.color is PieceColor.WHITE and step.new_position.y >= board.size_y - 2:
                score += LAST_LINE_BONUS

            if depth > 0:
                _try_step(step, board)
                reply, reply_score = _best_step(board, defensive, attacking, depth)
                if reply != UNABLE_MOVE:
                    score -= reply_score * DEPTH_COEFFICIENT
                _undo_step(step, board)

            if score > best_score or (score == best_score and random.random() < 0.5):
                best_score = score
                result = step

    return result, best_score


def _try_step(step: ChessPieceStep, board: ChessBoard) -> None:
    piece = board[step.previous_position].current_piece
    if piece is None:
        logger.error("search step has no piece on its starting cell")
        return
    board[step.previous_position].current_piece = None
    board.set(step.new_position.y, step.new_position.x, piece)
    if step.attacked_piece is not None:
        step.attacked_piece.is_dead = True


def _undo_step(step: ChessPieceStep, board: ChessBoard) -> None:
    piece = board[step.new_position].current_piece
    vacated = board[step.previous_position].current_piece
    if piece is None or vacated is not None:
        logger.error("cannot undo search step: board does not match it")
        return
    board.set(step.previous_position.y, step.previous_position.x, piece)
    board[step.new_position].current_piece = None
    if step.attacked_piece is not None:
        board.set(step.new_position.y, step.new_position.x, step.attacked_piece)
        step.attacked_piece.is_dead = False