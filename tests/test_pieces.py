import pytest

from dealerchess.board import CellIndex, ChessBoard, PieceColor
from dealerchess.pieces import Bishop, King, Knight, Pawn, Queen, Rook


def _place(board, piece, y, x):
    board.set(y, x, piece)
    return piece


def _targets(moves):
    return {m.new_position for m in moves}


@pytest.mark.parametrize(
    "cls, value",
    [(Bishop, 3), (King, 999), (Knight, 3), (Pawn, 1), (Queen, 9), (Rook, 5)],
)
def test_relative_values(cls, value):
    assert cls(PieceColor.WHITE).relative_value() == value


@pytest.mark.parametrize(
    "cls, letter",
    [(Bishop, "B"), (King, "K"), (Knight, "N"), (Pawn, "P"), (Queen, "Q"), (Rook, "R")],
)
def test_log_view_by_color(cls, letter):
    assert cls(PieceColor.WHITE).log_view() == letter
    assert cls(PieceColor.BLACK).log_view() == letter.lower()


def test_moves_start_from_current_cell():
    board = ChessBoard(6, 6)
    for cls in (Bishop, King, Knight, Queen, Rook):
        piece = _place(board, cls(PieceColor.WHITE), 2, 3)
        moves = piece.legal_moves(board)
        assert moves
        assert all(m.previous_position == CellIndex(2, 3) for m in moves)
        board[CellIndex(2, 3)].current_piece = None


def test_rook_stays_on_lines():
    board = ChessBoard(5, 7)
    rook = _place(board, Rook(PieceColor.WHITE), 2, 4)
    for cell in _targets(rook.legal_moves(board)):
        assert cell.y == 2 or cell.x == 4
        assert board.is_valid_cell(cell)


def test_rook_blocked_by_own_piece():
    board = ChessBoard(4, 4)
    rook = _place(board, Rook(PieceColor.WHITE), 0, 0)
    _place(board, Pawn(PieceColor.WHITE), 0, 2)
    targets = _targets(rook.legal_moves(board))
    assert CellIndex(0, 1) in targets
    assert CellIndex(0, 2) not in targets
    assert CellIndex(0, 3) not in targets


def test_rook_captures_enemy_and_stops():
    board = ChessBoard(4, 4)
    rook = _place(board, Rook(PieceColor.WHITE), 0, 0)
    enemy = _place(board, Knight(PieceColor.BLACK), 2, 0)
    moves = rook.legal_moves(board)
    captures = [m for m in moves if m.attacked_piece is not None]
    assert [m.new_position for m in captures] == [CellIndex(2, 0)]
    assert captures[0].attacked_piece is enemy
    assert captures[0].step_score() == enemy.relative_value()
    assert CellIndex(3, 0) not in _targets(moves)


def test_slider_stops_before_inaccessible_cell():
    board = ChessBoard(4, 4)
    rook = _place(board, Rook(PieceColor.WHITE), 0, 0)
    board.set_cell_accessibility(0, 2, False)
    targets = _targets(rook.legal_moves(board))
    assert CellIndex(0, 1) in targets
    assert CellIndex(0, 2) not in targets
    assert CellIndex(0, 3) not in targets


def test_bishop_moves_diagonally():
    board = ChessBoard(6, 6)
    bishop = _place(board, Bishop(PieceColor.BLACK), 2, 2)
    for cell in _targets(bishop.legal_moves(board)):
        assert abs(cell.y - 2) == abs(cell.x - 2) > 0


def test_queen_is_rook_plus_bishop():
    board = ChessBoard(6, 5)
    _place(board, Pawn(PieceColor.WHITE), 4, 1)
    _place(board, Knight(PieceColor.BLACK), 1, 1)
    queen = _place(board, Queen(PieceColor.WHITE), 2, 1)
    queen_targets = _targets(queen.legal_moves(board))
    board[CellIndex(2, 1)].current_piece = None
    rook = _place(board, Rook(PieceColor.WHITE), 2, 1)
    rook_targets = _targets(rook.legal_moves(board))
    board[CellIndex(2, 1)].current_piece = None
    bishop = _place(board, Bishop(PieceColor.WHITE), 2, 1)
    bishop_targets = _targets(bishop.legal_moves(board))
    assert queen_targets == rook_targets | bishop_targets


def test_king_moves_one_cell():
    board = ChessBoard(3, 3)
    king = _place(board, King(PieceColor.WHITE), 1, 1)
    targets = _targets(king.legal_moves(board))
    assert len(targets) == 8
    assert all(max(abs(c.y - 1), abs(c.x - 1)) == 1 for c in targets)


def test_king_in_corner_stays_on_board():
    board = ChessBoard(3, 3)
    king = _place(board, King(PieceColor.BLACK), 0, 0)
    for cell in _targets(king.legal_moves(board)):
        assert board.is_valid_cell(cell)


def test_knight_jumps_in_l_shape():
    board = ChessBoard(5, 5)
    _place(board, Pawn(PieceColor.WHITE), 1, 2)
    knight = _place(board, Knight(PieceColor.WHITE), 2, 2)
    moves = knight.legal_moves(board)
    assert len(moves) == 8
    for cell in _targets(moves):
        assert sorted((abs(cell.y - 2), abs(cell.x - 2))) == [1, 2]


def test_knight_does_not_capture_own_piece():
    board = ChessBoard(5, 5)
    knight = _place(board, Knight(PieceColor.WHITE), 2, 2)
    _place(board, Pawn(PieceColor.WHITE), 4, 3)
    assert CellIndex(4, 3) not in _targets(knight.legal_moves(board))


def test_white_pawn_advances_up():
    board = ChessBoard(4, 4)
    pawn = _place(board, Pawn(PieceColor.WHITE), 1, 1)
    moves = pawn.legal_moves(board)
    assert _targets(moves) == {CellIndex(2, 1)}
    assert moves[0].attacked_piece is None


def test_black_pawn_advances_down():
    board = ChessBoard(4, 4)
    pawn = _place(board, Pawn(PieceColor.BLACK), 2, 1)
    assert _targets(pawn.legal_moves(board)) == {CellIndex(1, 1)}


def test_pawn_captures_diagonally_only():
    board = ChessBoard(4, 4)
    pawn = _place(board, Pawn(PieceColor.WHITE), 1, 1)
    left = _place(board, Rook(PieceColor.BLACK), 2, 0)
    _place(board, Rook(PieceColor.BLACK), 2, 1)
    _place(board, Rook(PieceColor.WHITE), 2, 2)
    moves = pawn.legal_moves(board)
    assert _targets(moves) == {CellIndex(2, 0)}
    assert moves[0].attacked_piece is left


def test_pawn_cannot_step_on_inaccessible_cell():
    board = ChessBoard(4, 4)
    pawn = _place(board, Pawn(PieceColor.WHITE), 1, 1)
    board.set_cell_accessibility(2, 1, False)
    assert pawn.legal_moves(board) == []