"""Chess move search, board model, save data and turn-timer mechanics for a dealer-versus-king chess game."""

__version__ = "0.1.0"