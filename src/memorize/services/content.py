from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from memorize.services.themes import ThemeDefinition, ThemeRegistry


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_schema(path: Path) -> object:
    return _load_json(path)


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_list(obj: Mapping[str, object], key: str) -> list[object]:
    v = obj.get(key)
    if not isinstance(v, list):
        raise ContentError(f"Expected list for {key}")
    return v


def parse_themes(raw: object) -> ThemeRegistry:
    """Turn an already-validated themes document into a registry."""
    if not isinstance(raw, dict):
        raise ContentError("themes.json must be an object")

    themes: dict[str, ThemeDefinition] = {}
    for item in _require_list(raw, "themes"):
        if not isinstance(item, dict):
            continue
        name = _require_str(item, "name")
        if name in themes:
            raise ContentError(f"Duplicate theme name: {name}")
        tokens = tuple(t for t in _require_list(item, "tokens") if isinstance(t, str))
        themes[name] = ThemeDefinition(name=name, tokens=tokens, color=_require_str(item, "color"))

    order: list[str] = []
    for name in _require_list(raw, "default_order"):
        if not isinstance(name, str):
            continue
        if name not in themes:
            raise ContentError(f"default_order names unknown theme: {name}")
        order.append(name)
    if not order:
        raise ContentError("default_order must name at least one theme")
    return ThemeRegistry(themes=themes, default_order=tuple(order))


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_themes(self) -> ThemeRegistry:
        path = self._data_dir / "themes.json"
        schema = _load_schema(self._schema_dir / "themes.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        return parse_themes(raw)

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_themes()
