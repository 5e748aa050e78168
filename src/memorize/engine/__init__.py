"""Deterministic, headless rules engine for the memory game.

IMPORTANT: This package must never import a UI toolkit.
"""

from .actions import (
    ChooseCardAction,
    DecreaseCardsAction,
    IncreaseCardsAction,
    NewGameAction,
    ResetAction,
)
from .game import GameConfig, MemoryGame, StepResult, new_game
from .types import Card, CardState

__all__ = [
    "Card",
    "CardState",
    "ChooseCardAction",
    "DecreaseCardsAction",
    "GameConfig",
    "IncreaseCardsAction",
    "MemoryGame",
    "NewGameAction",
    "ResetAction",
    "StepResult",
    "new_game",
]
