"""Turn sequencing for a single Quixo game."""

from .controller import GameState, TurnController, TurnPhase

__all__ = ["GameState", "TurnController", "TurnPhase"]
