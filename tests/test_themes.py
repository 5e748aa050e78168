from __future__ import annotations

import random

from memorize.paths import get_paths
from memorize.services.content import ContentService
from memorize.services.themes import Theme, ThemeCatalog, theme_for


def _load_themes():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_themes()


def _catalog(seed: int = 0) -> ThemeCatalog:
    return ThemeCatalog.default(_load_themes(), rng=random.Random(seed))


def test_builtin_theme_lookup() -> None:
    registry = _load_themes()
    travel = theme_for(registry, "Travel")
    assert travel.name == "Travel"
    assert travel.color == "Green"
    assert len(travel.content_pool) == 28
    assert travel.pair_count == 3
    assert travel.is_playable()

    # every lookup is a fresh copy
    other = theme_for(registry, "Travel")
    other.increase_pairs()
    assert travel.pair_count == 3


def test_unknown_theme_is_empty_not_an_error() -> None:
    theme = theme_for(_load_themes(), "Knitting")
    assert theme.name == "Knitting"
    assert theme.content_pool == ()
    assert theme.color == "White"
    assert theme.pair_count == 0
    assert not theme.is_playable()
    assert theme.increase_pairs() is False
    assert theme.decrease_pairs() is False
    assert theme.pair_count == 0


def test_pair_count_bounds() -> None:
    theme = Theme.create("Tiny", ["x", "y", "z", "w"], "Red")
    assert theme.pair_count == 3
    assert theme.increase_pairs() is True
    assert theme.pair_count == 4
    # at the pool size
    assert theme.increase_pairs() is False
    assert theme.pair_count == 4

    while theme.pair_count > 1:
        assert theme.decrease_pairs() is True
    assert theme.decrease_pairs() is False
    assert theme.pair_count == 1


def test_small_pool_clamps_default_pair_count() -> None:
    theme = Theme.create("Duo", ["x", "y"], "Blue")
    assert theme.pair_count == 2
    assert theme.pair_count <= len(theme.content_pool)


def test_default_catalog_order_and_selection() -> None:
    catalog = _catalog()
    assert catalog.names() == ["Sports", "Occupations", "Halloween", "Food", "Travel", "Valentine"]
    assert catalog.current_index == 0
    assert catalog.current_theme.name == "Sports"

    assert catalog.select(3) is True
    assert catalog.current_theme.name == "Food"
    assert catalog.select(6) is False
    assert catalog.select(-1) is False
    assert catalog.current_theme.name == "Food"

    assert catalog.index_of("Travel") == 4
    assert catalog.index_of(catalog.themes[1]) == 1
    assert catalog.index_of("Nope") is None
    assert catalog.theme_for("Halloween").color == "Orange"


def test_add_theme_ignores_duplicate_names() -> None:
    catalog = _catalog()
    assert catalog.add_theme("Shapes", ["■", "●", "▲", "◆"], "Yellow") is True
    assert len(catalog) == 7
    assert catalog.add_theme("Shapes", ["x"], "Gray") is False
    assert catalog.add_theme("Sports", ["x"], "Gray") is False
    assert len(catalog) == 7
    shapes = catalog.themes[catalog.index_of("Shapes")]  # type: ignore[index]
    assert shapes.color == "Yellow"
    assert shapes.content_pool == ("■", "●", "▲", "◆")


def test_pair_adjustment_acts_on_current_theme_in_place() -> None:
    catalog = _catalog()
    catalog.select(2)
    assert catalog.increase_pairs() is True
    assert catalog.themes[2].pair_count == 4
    assert catalog.themes[0].pair_count == 3

    assert catalog.decrease_pairs() is True
    assert catalog.decrease_pairs() is True
    assert catalog.decrease_pairs() is True
    assert catalog.themes[2].pair_count == 1
    assert catalog.decrease_pairs() is False
    assert catalog.themes[2].pair_count == 1

    catalog.themes[2].pair_count = len(catalog.themes[2].content_pool)
    assert catalog.increase_pairs() is False
    assert catalog.themes[2].pair_count == 12


def test_random_theme_covers_runtime_additions() -> None:
    catalog = _catalog(seed=11)
    catalog.add_theme("Shapes", ["■", "●", "▲"], "Yellow")
    seen = {catalog.random_theme().name for _ in range(300)}
    assert seen == set(catalog.names())


def test_duplicate_tokens_collapse_to_one_pair() -> None:
    theme = Theme.create("Dup", ["x", "x", "y"], "Gray")
    assert theme.content_pool == ("x", "y")
    assert theme.pair_count == 2
    assert theme.increase_pairs() is False
