"""Game state flags and saving of level progress."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from dealerchess.index2d import Index2D

logger = logging.getLogger(__name__)

LEVEL_DATA_SLOT = "LevelData"

Handler = Callable[[], None]


class GameMode:
    """Tracks whether the game is over and notifies listeners of game events."""

    def __init__(self) -> None:
        self.is_game_over = False
        self.winning_handlers: List[Handler] = []
        self.losing_handlers: List[Handler] = []
        self.focus_lost_handlers: List[Handler] = []
        self.focus_gained_handlers: List[Handler] = []

    @staticmethod
    def _notify(handlers: List[Handler]) -> None:
        for handler in list(handlers):
            handler()

    def set_winning_game(self) -> None:
        """Finish the game as won."""
        self.is_game_over = True
        self._notify(self.winning_handlers)

    def set_losing_game(self) -> None:
        """Finish the game as lost."""
        self.is_game_over = True
        self._notify(self.losing_handlers)

    def on_window_focus_changed(self, is_focused: bool) -> None:
        """React to the application window gaining or losing focus."""
        if is_focused:
            self._notify(self.focus_gained_handlers)
        else:
            self._notify(self.focus_lost_handlers)


@dataclass
class LevelData:
    """Saved state of a level; the defaults describe an empty save."""

    is_players_move: bool = True
    current_stage_num: int = 0
    move_limit_time: float = 0.0
    operator_table: Optional[str] = None
    number_along_axes: Index2D = field(default_factory=Index2D)
    square_components_data: List[Dict[str, Any]] = field(default_factory=list)
    players_data: List[Dict[str, Any]] = field(default_factory=list)
    chess_mans_data: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-compatible form of this data."""
        return {
            "is_players_move": self.is_players_move,
            "current_stage_num": self.current_stage_num,
            "move_limit_time": self.move_limit_time,
            "operator_table": self.operator_table,
            "number_along_axes": [self.number_along_axes.x, self.number_along_axes.y],
            "square_components_data": copy.deepcopy(self.square_components_data),
            "players_data": copy.deepcopy(self.players_data),
            "chess_mans_data": copy.deepcopy(self.chess_mans_data),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LevelData":
        """Build level data from the form produced by ``to_dict``."""
        if not isinstance(data, Mapping):
            raise TypeError("level data must be a mapping")
        axes = data.get("number_along_axes", (0, 0))
        if len(axes) != 2:
            raise ValueError("number_along_axes must hold two values")
        table = data.get("operator_table")
        return cls(
            is_players_move=bool(data.get("is_players_move", True)),
            current_stage_num=int(data.get("current_stage_num", 0)),
            move_limit_time=float(data.get("move_limit_time", 0.0)),
            operator_table=None if table is None else str(table),
            number_along_axes=Index2D(int(axes[0]), int(axes[1])),
            square_components_data=[dict(d) for d in data.get("square_components_data", [])],
            players_data=[dict(d) for d in data.get("players_data", [])],
            chess_mans_data=[dict(d) for d in data.get("chess_mans_data", [])],
        )


class GameInstance:
    """Holds level progress and keeps it in a save slot.

    With ``save_dir`` the slot is a JSON file in that directory; without it
    the data lives in memory only.
    """

    def __init__(self, save_dir: Union[str, Path, None] = None) -> None:
        self.is_new_game = False
        self._slot_path = Path(save_dir) / f"{LEVEL_DATA_SLOT}.json" if save_dir else None
        self._saved = self._load_slot()
        if self._saved is None:
            self._saved = LevelData()
            self.clear_level_data()

    @property
    def slot_path(self) -> Optional[Path]:
        """File the level data is written to, if any."""
        return self._slot_path

    def save_level_data(self, level_data: LevelData) -> None:
        """Store ``level_data`` as the current save."""
        self._saved = copy.deepcopy(level_data)
        if self._slot_path is not None:
            self._slot_path.parent.mkdir(parents=True, exist_ok=True)
            self._slot_path.write_text(
                json.dumps(self._saved.to_dict(), indent=2), encoding="utf-8"
            )

    def clear_level_data(self) -> None:
        """Replace an existing save with empty data."""
        if self.is_game_saved():
            self.save_level_data(LevelData())

    def load_level_data(self) -> LevelData:
        """A copy of the current save."""
        return copy.deepcopy(self._saved)

    def is_game_saved(self) -> bool:
        """True if the save holds at least one player."""
        return bool(self._saved.players_data)

    def _load_slot(self) -> Optional[LevelData]:
        if self._slot_path is None or not self._slot_path.is_file():
            return None
        try:
            return LevelData.from_dict(json.loads(self._slot_path.read_text(encoding="utf-8")))
        except (OSError, ValueError, TypeError, KeyError) as error:
            logger.warning("cannot read save slot %s: %s", self._slot_path, error)
            return None