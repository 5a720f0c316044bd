"""Chess move legality and game-status rules."""

__version__ = "0.1.0"
