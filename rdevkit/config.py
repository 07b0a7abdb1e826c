"""Configuration loading for rdevkit (.rdevkit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".rdevkit.yml"

DEFAULT_PREVIEW_ROWS = 5
DEFAULT_SOURCE_DIRS = ("R", "tests/testthat")


@dataclass
class DatabaseConfig:
    """Settings for the database summary."""

    preview_rows: int = DEFAULT_PREVIEW_ROWS


@dataclass
class TreeConfig:
    """Rendering options for the directory tree."""

    ascii: bool = False
    include_hidden: bool = False
    exclude: List[str] = field(default_factory=list)


@dataclass
class CodeConfig:
    """Settings for the package source summary."""

    source_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_DIRS))
    tree: TreeConfig = field(default_factory=TreeConfig)


@dataclass
class MetaConfig:
    """File names used by the metadata updater."""

    changelog: str = "NEWS.md"
    description: str = "DESCRIPTION"


@dataclass
class RdevkitConfig:
    """Represents the settings defined in .rdevkit.yml."""

    root: Path
    db: DatabaseConfig = field(default_factory=DatabaseConfig)
    code: CodeConfig = field(default_factory=CodeConfig)
    meta: MetaConfig = field(default_factory=MetaConfig)


def load_config(config_path: Path) -> RdevkitConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RdevkitConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    db = DatabaseConfig()
    db_data = _as_dict(data.get("db"))
    if db_data:
        preview_rows = _as_int(db_data.get("preview_rows"))
        if preview_rows is not None:
            if preview_rows < 0:
                raise ConfigError("db.preview_rows must not be negative")
            db.preview_rows = preview_rows

    code = CodeConfig()
    code_data = _as_dict(data.get("code"))
    if code_data:
        if "source_dirs" in code_data:
            code.source_dirs = _as_str_list(code_data.get("source_dirs"))
        tree_data = _as_dict(code_data.get("tree"))
        if tree_data:
            code.tree = TreeConfig(
                ascii=_as_bool(tree_data.get("ascii")) or False,
                include_hidden=_as_bool(tree_data.get("include_hidden")) or False,
                exclude=_as_str_list(tree_data.get("exclude")),
            )

    meta = MetaConfig()
    meta_data = _as_dict(data.get("meta"))
    if meta_data:
        meta.changelog = _as_str(meta_data.get("changelog")) or meta.changelog
        meta.description = _as_str(meta_data.get("description")) or meta.description

    return RdevkitConfig(root=root, db=db, code=code, meta=meta)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
