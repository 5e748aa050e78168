from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

CardState = Literal[
    "face_down_and_matched",
    "face_down_and_unmatched",
    "face_up_and_matched",
    "face_up_and_unmatched",
]

# Anything comparable with == works as card content.
ContentT = TypeVar("ContentT")


@dataclass
class Card(Generic[ContentT]):
    id: int
    content: ContentT
    face_up: bool = False
    matched: bool = False
    seen: bool = False  # set the first time the card goes back face down

    def flip(self) -> None:
        self.face_up = not self.face_up

    def turn_face_up(self) -> None:
        self.face_up = True

    def turn_face_down(self) -> bool:
        """Turn the card face down.

        Returns True when the move costs a penalty: the card had already been
        seen and is still unmatched.
        """
        if not self.face_up:
            return False
        was_seen = self.seen
        self.seen = True
        self.face_up = False
        return was_seen and not self.matched

    def mark_matched(self) -> None:
        self.matched = True

    def matches(self, other: "Card[ContentT]") -> bool:
        return self.content == other.content

    def state(self) -> CardState:
        if self.matched:
            return "face_up_and_matched" if self.face_up else "face_down_and_matched"
        return "face_up_and_unmatched" if self.face_up else "face_down_and_unmatched"
