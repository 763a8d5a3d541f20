from .logic import advance
from .particles import create_burst
from .state import Direction, GameState, Snapshot, TickResult

__all__ = ["advance", "create_burst", "Direction", "GameState", "Snapshot", "TickResult"]
