from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from memorize.engine.game import GameConfig

UNKNOWN_THEME_COLOR = "White"


@dataclass(frozen=True)
class ThemeDefinition:
    name: str
    tokens: tuple[str, ...]
    color: str


@dataclass(frozen=True)
class ThemeRegistry:
    """Immutable built-in themes, as loaded from content."""

    themes: dict[str, ThemeDefinition]
    default_order: tuple[str, ...]

    def get(self, name: str) -> ThemeDefinition | None:
        return self.themes.get(name)


@dataclass
class Theme:
    name: str
    content_pool: tuple[str, ...]
    color: str
    pair_count: int
    min_pair_count: int = 1

    @staticmethod
    def create(
        name: str, tokens: Sequence[str], color: str, config: GameConfig | None = None
    ) -> "Theme":
        cfg = config or GameConfig()
        # duplicate tokens would deal more than two cards of one content
        pool = tuple(dict.fromkeys(tokens))
        return Theme(
            name=name,
            content_pool=pool,
            color=color,
            # never more pairs than the pool can fill; an empty pool gives 0
            pair_count=min(cfg.default_pair_count, len(pool)),
            min_pair_count=cfg.min_pair_count,
        )

    @property
    def max_pair_count(self) -> int:
        return len(self.content_pool)

    def is_playable(self) -> bool:
        return self.pair_count > 0

    def increase_pairs(self) -> bool:
        if self.pair_count < self.max_pair_count:
            self.pair_count += 1
            return True
        return False

    def decrease_pairs(self) -> bool:
        if self.pair_count > self.min_pair_count:
            self.pair_count -= 1
            return True
        return False


def theme_for(registry: ThemeRegistry, name: str, config: GameConfig | None = None) -> Theme:
    """Fresh copy of the built-in theme ``name``.

    Unknown names give an empty, unplayable theme instead of an error.
    """
    definition = registry.get(name)
    if definition is None:
        return Theme.create(name, (), UNKNOWN_THEME_COLOR, config)
    return Theme.create(definition.name, definition.tokens, definition.color, config)


@dataclass
class ThemeCatalog:
    """Ordered, name-unique themes plus the current selection.

    One catalog is shared by every game of a session, so pair counts and the
    selected theme outlive the individual decks.
    """

    registry: ThemeRegistry
    themes: list[Theme]
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    current_index: int = 0

    @staticmethod
    def default(
        registry: ThemeRegistry,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> "ThemeCatalog":
        cfg = config or GameConfig()
        themes = [theme_for(registry, name, cfg) for name in registry.default_order]
        return ThemeCatalog(
            registry=registry,
            themes=themes,
            config=cfg,
            rng=rng or random.Random(),
            current_index=cfg.default_theme_index,
        )

    def __len__(self) -> int:
        return len(self.themes)

    @property
    def current_theme(self) -> Theme:
        return self.themes[self.current_index]

    def names(self) -> list[str]:
        return [t.name for t in self.themes]

    def theme_for(self, name: str) -> Theme:
        return theme_for(self.registry, name, self.config)

    def index_of(self, theme: Theme | str) -> int | None:
        name = theme.name if isinstance(theme, Theme) else theme
        for i, t in enumerate(self.themes):
            if t.name == name:
                return i
        return None

    def select(self, index: int) -> bool:
        if index < 0 or index >= len(self.themes):
            return False
        self.current_index = index
        return True

    def add_theme(self, name: str, tokens: Sequence[str], color: str) -> bool:
        if self.index_of(name) is not None:
            return False
        self.themes.append(Theme.create(name, tokens, color, self.config))
        return True

    def increase_pairs(self) -> bool:
        return self.current_theme.increase_pairs()

    def decrease_pairs(self) -> bool:
        return self.current_theme.decrease_pairs()

    def random_index(self) -> int:
        return self.rng.randrange(len(self.themes))

    def random_theme(self) -> Theme:
        return self.themes[self.random_index()]
