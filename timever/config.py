from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel


class Settings(BaseModel):
    """Typed generator settings loaded from YAML or environment."""

    LOG_LEVEL: str = "INFO"

    # Locations relative to the application root -------------------------
    VERSION_FILE: str = "config/version.rb"
    APP_CONFIG_FILE: str = "config/application.yaml"
    VERSION_TEMPLATE: str = "version_time.rb"

    # Timestamp version layout ------------------------------------------
    PRODUCTION_PREFIX: str = "Rel"
    DEVELOPMENT_PREFIX: str = "Dev"
    TIMESTAMP_FORMAT: str = "%Y%m%d%H%M"


_BASE_DIR = Path(__file__).resolve().parent.parent


def _load_env(path: Path) -> Dict[str, Any]:
    """Parse simple KEY=VALUE lines from an .env file."""
    data: Dict[str, Any] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, val = line.split("=", 1)
            data[key.strip()] = val.strip()
    return data


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a mapping from a YAML file, returning ``{}`` for empty files."""
    with open(path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f)
    return content or {}


def load_config() -> Settings:
    """Load settings from .env or YAML file."""
    config_path = os.environ.get("TIMEVER_CONFIG")
    if config_path:
        path = Path(config_path)
    else:
        candidates = [
            _BASE_DIR / "timever.yaml",
            _BASE_DIR / "timever.yml",
            _BASE_DIR / ".env",
        ]
        path = next((p for p in candidates if p.exists()), None)

    data: Dict[str, Any] = {}
    if path and path.exists():
        if path.suffix in {".yaml", ".yml"}:
            try:
                data = _load_yaml(path)
            except yaml.YAMLError:
                data = {}
        else:
            data = _load_env(path)

    cfg = {**Settings().model_dump(), **data}
    return Settings(**cfg)


def save_config(config: Settings, path: Path | None = None) -> None:
    """Persist settings to a YAML file."""
    if path is None:
        env_path = os.environ.get("TIMEVER_CONFIG")
        path = Path(env_path) if env_path else _BASE_DIR / "timever.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.model_dump(), f)


CONFIG = load_config()
LOCK = threading.Lock()


def get(name: str, default: Any | None = None) -> Any:
    """Return setting ``name`` with optional fallback."""
    with LOCK:
        return getattr(CONFIG, name, default)


def reload() -> None:
    """Reload settings from disk into the global CONFIG object."""
    global CONFIG
    with LOCK:
        CONFIG = load_config()


def update(values: Dict[str, Any]) -> None:
    """Update global settings with provided key/value pairs and persist."""
    with LOCK:
        for key, val in values.items():
            if hasattr(CONFIG, key):
                setattr(CONFIG, key, val)
        save_config(CONFIG)
