"""Game session layer: turn engine, input vocabulary and read-only views."""

from .session import KEYMAP, Direction, GameOutcome, GameSession, TurnResult, generate_map

__all__ = ["GameSession", "GameOutcome", "TurnResult", "Direction", "KEYMAP", "generate_map"]
