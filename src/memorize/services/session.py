from __future__ import annotations

import copy
import random
from typing import Iterable

from memorize.engine.actions import (
    DISCARDING_ACTIONS,
    Action,
    ChooseCardAction,
    DecreaseCardsAction,
    IncreaseCardsAction,
    NewGameAction,
    ResetAction,
)
from memorize.engine.game import GameConfig, MemoryGame, StepResult
from memorize.engine.types import Card
from memorize.services.telemetry import TelemetryEvent, TelemetryService
from memorize.services.themes import Theme, ThemeCatalog, ThemeRegistry

ThemeSelector = int | str | Theme | None


class GameSession:
    """Owns the deck in play and routes player intents into it.

    The catalog is passed in rather than looked up, so the selected theme and
    every theme's pair count survive each replaced deck.
    """

    def __init__(
        self,
        catalog: ThemeCatalog,
        config: GameConfig | None = None,
        seed: int | None = None,
        telemetry: TelemetryService | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or catalog.config
        self.seed = seed
        self.rng = random.Random(seed)
        self.telemetry = telemetry
        self.corner_radius = self.config.initial_corner_radius
        self.action_log: list[Action] = []
        self.game: MemoryGame[str] = self._create_game(self.catalog.random_index())

    def _log(self, event_type: TelemetryEvent, payload: dict[str, object]) -> None:
        if self.telemetry is not None:
            self.telemetry.log(event_type, payload)

    def _create_game(self, index: int) -> MemoryGame[str]:
        self.catalog.select(index)
        theme = self.catalog.current_theme
        pool = list(theme.content_pool)
        self.rng.shuffle(pool)
        game = MemoryGame.create(
            theme.pair_count, lambda pair_index: pool[pair_index], self.rng, config=self.config
        )
        game.event_log.append(
            {"type": "GAME_STARTED", "theme": theme.name, "pairs": game.number_of_pairs()}
        )
        self._log("new_game", {"theme": theme.name, "pairs": game.number_of_pairs()})
        return game

    def _resolve_index(self, selector: ThemeSelector) -> int:
        if selector is None:
            return self.catalog.random_index()
        if isinstance(selector, int):
            if 0 <= selector < len(self.catalog):
                return selector
            return self.catalog.current_index
        found = self.catalog.index_of(selector)
        return self.catalog.current_index if found is None else found

    # ----- intents

    def new_game(self, selector: ThemeSelector = None) -> None:
        """Replace the deck with a fresh one.

        ``selector`` is a catalog index, a theme or theme name, or None for a
        random theme. Selectors that name nothing in the catalog keep the
        current theme.
        """
        self.game = self._create_game(self._resolve_index(selector))

    def reset(self) -> None:
        self.new_game(self.catalog.current_index)

    def _pairs_changed(self) -> None:
        theme = self.catalog.current_theme
        self._log("pairs_changed", {"theme": theme.name, "pairs": theme.pair_count})
        self.reset()

    def increase_cards(self) -> bool:
        if not self.catalog.increase_pairs():
            return False
        self._pairs_changed()
        return True

    def decrease_cards(self) -> bool:
        if not self.catalog.decrease_pairs():
            return False
        self._pairs_changed()
        return True

    def choose(self, card_id: int) -> StepResult:
        result = self.game.choose(card_id)
        if result.ok and any(e.get("type") == "GAME_OVER" for e in result.events):
            self._log(
                "game_over",
                {"theme": self.theme_name(), "score": self.score(), "best": self.best_possible_score()},
            )
        return result

    def apply(self, action: Action) -> StepResult:
        """Dispatch one intent and record it for replay."""
        self.action_log.append(action)

        if isinstance(action, ChooseCardAction):
            return self.choose(action.card_id)
        if isinstance(action, NewGameAction):
            self.new_game(action.theme)
            return StepResult(ok=True, events=list(self.game.event_log))
        if isinstance(action, ResetAction):
            self.reset()
            return StepResult(ok=True, events=list(self.game.event_log))
        if isinstance(action, IncreaseCardsAction):
            if not self.increase_cards():
                return StepResult(ok=False, events=[], error="Theme has no more tokens to add.")
            return StepResult(ok=True, events=list(self.game.event_log))
        if isinstance(action, DecreaseCardsAction):
            if not self.decrease_cards():
                return StepResult(ok=False, events=[], error="Theme is already at its fewest pairs.")
            return StepResult(ok=True, events=list(self.game.event_log))
        return StepResult(ok=False, events=[], error="Unknown action.")

    # ----- queries

    @property
    def cards(self) -> list[Card[str]]:
        return self.game.cards

    def current_pairs(self) -> int:
        return self.game.number_of_pairs()

    def is_begun(self) -> bool:
        return self.game.any_face_up() or self.game.any_matched() or self.game.any_seen()

    def is_over(self) -> bool:
        return self.game.all_matched()

    def needs_confirmation(self) -> bool:
        """True while discarding the deck would throw away progress."""
        return self.is_begun() and not self.is_over()

    def requires_confirmation(self, action: Action) -> bool:
        """Whether the UI should ask before applying ``action``."""
        return isinstance(action, DISCARDING_ACTIONS) and self.needs_confirmation()

    def score(self) -> int:
        return self.game.score

    def best_possible_score(self) -> int:
        return self.game.best_possible_score()

    def theme_name(self) -> str:
        return self.catalog.current_theme.name

    def theme_color(self) -> str:
        return self.catalog.current_theme.color


def replay(
    registry: ThemeRegistry,
    seed: int,
    actions: Iterable[Action],
    config: GameConfig | None = None,
    catalog: ThemeCatalog | None = None,
) -> GameSession:
    """Rebuild a session from its seed and recorded actions.

    ``catalog`` is the catalog as it stood when the recorded session began,
    with any runtime themes and adjusted pair counts. It is copied, never
    mutated. Without it the replay starts from the built-in defaults.
    """
    if catalog is None:
        cfg = config or GameConfig()
        start = ThemeCatalog.default(registry, config=cfg, rng=random.Random(seed))
    else:
        cfg = config or catalog.config
        start = copy.deepcopy(catalog)
        start.rng = random.Random(seed)
    session = GameSession(start, config=cfg, seed=seed)
    for a in actions:
        session.apply(a)
    return session
