# dealerchess

Game logic for a chess game in which a lone white king crosses a board
while the "dealer" moves the black pieces against it. The package holds
the move search, the board model, save data, and the small per-tick
simulations (movement, turning, move timer) that sit around them.

## What is inside

- `dealerchess.index2d`: `Index2D`, a frozen two-dimensional integer
  index. `Index2D()` is `(0, 0)` and `Index2D(n)` is `(n, n)`. It adds
  and subtracts component-wise (also with a plain `int`), its ordering
  comparisons hold only when they hold on both axes, and it has
  `within`, `distance` and `scale_vector`.
- `dealerchess.randomness`: `random_int(maximum, minimum=0)`,
  `random_bool(chance=0.5)` and `random_float(maximum=1.0, minimum=0.0)`
  (quantised to steps of 1/256). Out-of-range arguments raise
  `ValueError`.
- `dealerchess.board`: `CellIndex` (row first), `PieceColor`,
  `ChessPieceStep` with `step_score()`, the `UNABLE_MOVE` marker,
  `SquareInfo`, the `ChessPiece` base class and `ChessBoard`. The board
  keeps lists of white and black pieces and can mark cells as not
  steppable with `set_cell_accessibility`.
- `dealerchess.pieces`: `King`, `Queen`, `Rook`, `Bishop`, `Knight` and
  `Pawn`, each with `legal_moves(board)`, `relative_value()` and
  `log_view()`. Pawns only step forward one cell and capture
  diagonally; white pawns move towards increasing Y and black pawns
  towards decreasing Y. There is no castling, promotion or check rule.
- `dealerchess.coords`: `ChessManType`, `construct_piece(kind, color)`,
  and `game_to_ai` / `ai_to_game`, which swap the axes between game and
  search coordinates.
- `dealerchess.ai`: the move search.
  - `get_next_step(board, color, depth)` returns the best step for a
    colour, searching `depth` plies; equal scores are broken at random.
  - `get_next_step_async(board, color, depth, callback)` runs the search
    in a background thread, calls `callback` with the result and returns
    the started `threading.Thread`.
  - `do_step(step, board)` plays a step for good and drops the captured
    piece; it raises `ValueError` if the step's start cell is empty.
  - `is_unable_move(step)`, `render_board(board)` (a text picture) and
    `log_chess_board(board)` (writes that picture to the log).
- `dealerchess.game`: `GameMode` (game-over flag and lists of handlers
  for winning, losing and window focus changes), `LevelData` (a save
  snapshot with `to_dict` / `from_dict`) and `GameInstance`, which keeps
  the snapshot in memory or, given `save_dir`, in a `LevelData.json`
  file in that directory.
- `dealerchess.movement`: `Vector`, `Event` (a list of handlers called by
  `broadcast`), `Actor` and `ActorMovementComponent`, which moves its
  owner towards a point on each `tick`, easing in and out, and fires
  `on_approach`, `on_separation` and `on_completed_move`.
- `dealerchess.rotation`: `look_at_yaw` and `ActorRotationComponent`,
  which turns its owner's yaw towards a point on each `tick` and fires
  `on_completed_rotate`.
- `dealerchess.dealer_hand`: `DealerHand`, an actor that flies to a
  point (`move_to_location`), signals readiness and the grab through
  events, and returns to its `base` actor (`move_to_base`).
- `dealerchess.time_beacons`: `TimeBeacon` and `TimeBeaconGenerator`.
  The generator places two beacons per square along the X axis, shares
  the move time between the columns, and on `tick` lights one pair
  after another from the far end of the board.

## Example

```python
from dealerchess.ai import get_next_step, is_unable_move, render_board
from dealerchess.board import ChessBoard, PieceColor
from dealerchess.pieces import King, Queen

board = ChessBoard()
board.init(8, 8)

king = King(color=PieceColor.WHITE)
queen = Queen(color=PieceColor.BLACK)
board.set(0, 4, king)
board.set(5, 4, queen)

print(render_board(board))

step = get_next_step(board, PieceColor.BLACK, 3)
if not is_unable_move(step):
    print(step.previous_position, "->", step.new_position)
```

`get_next_step` returns `UNABLE_MOVE` when the board has no white
pieces, or when the side to move has no legal step.

## What it does not do

There is no graphics, input handling or game loop: nothing spawns the
board squares or the pieces, runs the turns, or decides when a stage is
cleared. The simulation classes advance only when you call their `tick`
methods, and the events they fire are left for you to connect. Saving
is a single JSON slot; there is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```