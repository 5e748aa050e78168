from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChooseCardAction:
    card_id: int


@dataclass(frozen=True)
class NewGameAction:
    # Index or name of a catalog theme; None picks one at random.
    theme: int | str | None = None


@dataclass(frozen=True)
class ResetAction:
    pass


@dataclass(frozen=True)
class IncreaseCardsAction:
    pass


@dataclass(frozen=True)
class DecreaseCardsAction:
    pass


Action = ChooseCardAction | NewGameAction | ResetAction | IncreaseCardsAction | DecreaseCardsAction

# Intents that throw away the deck in play.
DISCARDING_ACTIONS = (NewGameAction, ResetAction, IncreaseCardsAction, DecreaseCardsAction)
