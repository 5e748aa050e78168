from __future__ import annotations

from typing import TYPE_CHECKING

from .game import MemoryGame
from .types import Card

if TYPE_CHECKING:
    from memorize.services.session import GameSession


def card_to_dict(c: Card[object]) -> dict[str, object]:
    return {
        "id": c.id,
        "content": c.content,
        "face_up": c.face_up,
        "matched": c.matched,
        "state": c.state(),
    }


def game_snapshot(game: MemoryGame[object]) -> dict[str, object]:
    """Return a JSON-serializable view of the deck, in display order."""
    return {
        "seed": game.seed,
        "cards": [card_to_dict(c) for c in game.cards],
        "score": game.score,
        "best_possible_score": game.best_possible_score(),
        "all_matched": game.all_matched(),
    }


def session_snapshot(session: "GameSession") -> dict[str, object]:
    """Everything a presentation layer needs to draw one frame."""
    snap = game_snapshot(session.game)
    theme = session.catalog.current_theme
    snap["theme"] = {"name": theme.name, "color": theme.color, "playable": theme.is_playable()}
    snap["needs_confirmation"] = session.needs_confirmation()
    snap["corner_radius"] = session.corner_radius
    return snap
