from __future__ import annotations

import json
from pathlib import Path

import pytest

from memorize.paths import get_paths
from memorize.services.content import ContentError, ContentService


def _service_with(tmp_path: Path, payload: object) -> ContentService:
    paths = get_paths()
    (tmp_path / "themes.json").write_text(json.dumps(payload), encoding="utf-8")
    return ContentService(tmp_path, paths.schema_dir)


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_builtin_registry_contents() -> None:
    paths = get_paths()
    registry = ContentService(paths.data_dir, paths.schema_dir).load_themes()
    assert registry.default_order == ("Sports", "Occupations", "Halloween", "Food", "Travel", "Valentine")
    assert sorted(registry.themes) == sorted(registry.default_order)
    for name in registry.default_order:
        definition = registry.get(name)
        assert definition is not None
        assert len(set(definition.tokens)) == len(definition.tokens)
    assert registry.get("Nope") is None


def test_schema_violation_is_reported(tmp_path: Path) -> None:
    content = _service_with(
        tmp_path,
        {"default_order": ["A"], "themes": [{"name": "A", "color": 3, "tokens": ["x"]}]},
    )
    with pytest.raises(ContentError, match="Schema validation failed"):
        content.load_themes()


def test_duplicate_and_dangling_names_are_rejected(tmp_path: Path) -> None:
    dup = _service_with(
        tmp_path,
        {
            "default_order": ["A"],
            "themes": [
                {"name": "A", "color": "Red", "tokens": ["x"]},
                {"name": "A", "color": "Blue", "tokens": ["y"]},
            ],
        },
    )
    with pytest.raises(ContentError, match="Duplicate theme name"):
        dup.load_themes()

    dangling = _service_with(
        tmp_path,
        {"default_order": ["B"], "themes": [{"name": "A", "color": "Red", "tokens": ["x"]}]},
    )
    with pytest.raises(ContentError, match="unknown theme"):
        dangling.load_themes()


def test_missing_and_malformed_files(tmp_path: Path) -> None:
    paths = get_paths()
    with pytest.raises(ContentError, match="Missing content file"):
        ContentService(tmp_path, paths.schema_dir).load_themes()

    (tmp_path / "themes.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError, match="Invalid JSON"):
        ContentService(tmp_path, paths.schema_dir).load_themes()
