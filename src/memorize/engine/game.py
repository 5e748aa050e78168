from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Generic

from .types import Card, ContentT

Event = dict[str, object]


@dataclass(frozen=True)
class GameConfig:
    match_reward: int = 2
    mismatch_penalty: int = 1
    default_pair_count: int = 3
    min_pair_count: int = 1
    default_theme_index: int = 0
    initial_corner_radius: float = 20.0  # presentation only


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class MemoryGame(Generic[ContentT]):
    cards: list[Card[ContentT]]
    config: GameConfig = field(default_factory=GameConfig)
    seed: int | None = None
    score: int = 0
    event_log: list[Event] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        pair_count: int,
        content_for: Callable[[int], ContentT],
        rng: random.Random,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> "MemoryGame[ContentT]":
        """Build two cards per pair index, then shuffle the display order.

        Ids are assigned before the shuffle, so pair ``i`` always owns ids
        ``2 * i`` and ``2 * i + 1``.
        """
        cards: list[Card[ContentT]] = []
        for pair_index in range(max(0, pair_count)):
            content = content_for(pair_index)
            cards.append(Card(id=pair_index * 2, content=content))
            cards.append(Card(id=pair_index * 2 + 1, content=content))
        rng.shuffle(cards)
        return cls(cards=cards, config=config or GameConfig(), seed=seed)

    # ----- derived state

    def index_of(self, card_id: int) -> int | None:
        for i, c in enumerate(self.cards):
            if c.id == card_id:
                return i
        return None

    def face_up_index(self) -> int | None:
        """Index of the one and only face-up card, None otherwise."""
        up = [i for i, c in enumerate(self.cards) if c.face_up]
        return up[0] if len(up) == 1 else None

    def all_matched(self) -> bool:
        return all(c.matched for c in self.cards)

    def none_matched(self) -> bool:
        return not self.any_matched()

    def none_face_up(self) -> bool:
        return not self.any_face_up()

    def any_seen(self) -> bool:
        return any(c.seen for c in self.cards)

    def any_matched(self) -> bool:
        return any(c.matched for c in self.cards)

    def any_face_up(self) -> bool:
        return any(c.face_up for c in self.cards)

    def number_of_pairs(self) -> int:
        return len(self.cards) // 2

    def best_possible_score(self) -> int:
        return self.config.match_reward * self.number_of_pairs()

    # ----- transitions

    def _turn_face_down(self, index: int) -> None:
        card = self.cards[index]
        if not card.face_up:
            return
        penalized = card.turn_face_down()
        self.event_log.append({"type": "CARD_FACE_DOWN", "card_id": card.id})
        if penalized:
            self.score -= int(penalized) * self.config.mismatch_penalty
            self.event_log.append(
                {"type": "PENALTY", "card_id": card.id, "amount": self.config.mismatch_penalty}
            )

    def set_face_up(self, index: int | None) -> None:
        """Make ``index`` the only face-up card.

        Every other face-up card goes face down and may cost a penalty.
        Passing None turns the whole deck face down.
        """
        for i, card in enumerate(self.cards):
            if i == index:
                if not card.face_up:
                    card.turn_face_up()
                    self.event_log.append({"type": "CARD_FACE_UP", "card_id": card.id})
            else:
                self._turn_face_down(i)

    def turn_all_face_down(self) -> None:
        if self.none_face_up():
            return
        self.set_face_up(None)

    def choose(self, card_id: int) -> StepResult:
        """Apply a single choice to the deck.

        Choosing an unknown, face-up or matched card changes nothing and
        reports ``ok=False``.
        """
        chosen = self.index_of(card_id)
        if chosen is None:
            return StepResult(ok=False, events=[], error="Unknown card.")
        card = self.cards[chosen]
        if card.face_up:
            return StepResult(ok=False, events=[], error="Card is already face up.")
        if card.matched:
            return StepResult(ok=False, events=[], error="Card is already matched.")

        mark = len(self.event_log)
        already_up = self.face_up_index()
        if already_up is not None:
            other = self.cards[already_up]
            if card.matches(other):
                card.mark_matched()
                other.mark_matched()
                self.score += self.config.match_reward
                self.event_log.append(
                    {
                        "type": "PAIR_MATCHED",
                        "card_ids": [other.id, card.id],
                        "reward": self.config.match_reward,
                    }
                )
        # A freshly matched card stays face up; its partner goes down.
        self.set_face_up(chosen)

        if self.all_matched():
            self.event_log.append({"type": "GAME_OVER", "score": self.score})
        return StepResult(ok=True, events=self.event_log[mark:])


def new_game(
    pair_count: int,
    content_for: Callable[[int], ContentT],
    seed: int | None = None,
    config: GameConfig | None = None,
) -> MemoryGame[ContentT]:
    rng = random.Random(seed)
    return MemoryGame.create(pair_count, content_for, rng, config=config, seed=seed)
