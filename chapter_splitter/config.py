"""
Config: split defaults stored in .chapter_splitter.json.

Lookup order: env CHAPTER_SPLITTER_CONFIG, then the cwd and its parents, then the
repo root. Missing or unreadable files give the defaults; CLI options override
whatever is loaded.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from chapter_splitter.models import SplitterSettings

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".chapter_splitter.json"
CONFIG_ENV_VAR = "CHAPTER_SPLITTER_CONFIG"


def _find_repo_root() -> Path | None:
    """Walk up from package dir to find a directory containing pyproject.toml or the config file."""
    start = Path(__file__).resolve().parent
    for parent in [start, *start.parents]:
        if (parent / "pyproject.toml").exists() or (parent / CONFIG_FILENAME).exists():
            return parent
    return None


def find_config_file() -> Path | None:
    """Return path to an existing config file, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).resolve()
        return p if p.exists() else None
    for d in [Path.cwd(), *Path.cwd().parents]:
        cf = d / CONFIG_FILENAME
        if cf.exists():
            return cf.resolve()
    repo = _find_repo_root()
    if repo is not None and (repo / CONFIG_FILENAME).exists():
        return (repo / CONFIG_FILENAME).resolve()
    return None


def get_config_path() -> Path:
    """Path to write the config to: env wins, else an existing file, else cwd."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).resolve()
    return find_config_file() or (Path.cwd() / CONFIG_FILENAME).resolve()


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Could not read config %s: %s; using defaults", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Config %s is not a JSON object; using defaults", path)
        return {}
    return data


def load_config(path: Path | None = None) -> SplitterSettings:
    """Load settings from path (or the discovered config file). Unknown keys are ignored."""
    path = Path(path) if path is not None else find_config_file()
    if path is None or not path.exists():
        return SplitterSettings()
    data = _read_json(path)
    known = {k: v for k, v in data.items() if k in SplitterSettings.model_fields}
    try:
        return SplitterSettings(**known)
    except ValidationError as e:
        log.warning("Invalid config %s: %s; using defaults", path, e)
        return SplitterSettings()


def save_config(settings: SplitterSettings, path: Path | None = None) -> Path:
    """Write settings as JSON. Returns the path written."""
    path = Path(path) if path is not None else get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(), f, indent=2)
    return path


def set_config_value(key: str, value: str, path: Path | None = None) -> Dict[str, Any]:
    """
    Set one setting and save. Value is given as a string (from the CLI) and
    validated by the settings model.

    Returns {"ok": True, "settings": ..., "path": ...} or {"ok": False, "error": msg}.
    """
    if key not in SplitterSettings.model_fields:
        return {"ok": False, "error": f"Unknown config key: {key}. Available: {list(SplitterSettings.model_fields)}"}
    path = Path(path) if path is not None else get_config_path()
    current = load_config(path)
    data = current.model_dump()
    data[key] = value
    try:
        settings = SplitterSettings(**data)
    except ValidationError as e:
        return {"ok": False, "error": f"Invalid value for {key}: {value!r} ({e.errors()[0]['msg']})"}
    written = save_config(settings, path)
    return {"ok": True, "settings": settings, "path": written}
