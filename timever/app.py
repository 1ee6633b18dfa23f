"""Application context handed to the code generators."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel

from timever import config as cfg
from timever.config import _load_yaml
from timever.logutils import logger
from timever.utils import camelize
from timever.version_string import VersionString


class PreconditionError(RuntimeError):
    """Raised when the application context cannot support a generator run."""


class AppConfig(BaseModel):
    """Persisted application configuration (``config/application.yaml``)."""

    name: str | None = None
    semantically_version: bool = False

    model_config = {
        "extra": "allow",
    }


_VERSION_RE = re.compile(
    r"""^\s*VERSION\s*=\s*(["'])((?:\\.|(?!\1).)+)\1""", re.MULTILINE
)
_ESCAPE_RE = re.compile(r"\\(.)")
_LEGACY_RE = {
    part: re.compile(rf"^\s*{part}\s*=\s*(\d+|nil|None)\s*$", re.MULTILINE)
    for part in ("MAJOR", "MINOR", "BUGFIX", "DEV")
}


def parse_version_file(text: str) -> VersionString | None:
    """Return the version declared in version file ``text``.

    Both the current ``VERSION = "..."`` layout and the legacy
    ``MAJOR``/``MINOR``/``BUGFIX``/``DEV`` constants are understood.
    """

    match = _VERSION_RE.search(text)
    if match:
        return VersionString(_ESCAPE_RE.sub(r"\1", match.group(2)))

    parts: Dict[str, int | None] = {}
    for part, pattern in _LEGACY_RE.items():
        found = pattern.search(text)
        if found is None or found.group(1) in {"nil", "None"}:
            parts[part] = None
        else:
            parts[part] = int(found.group(1))
    if any(parts[p] is None for p in ("MAJOR", "MINOR", "BUGFIX")):
        return None
    version = f"{parts['MAJOR']}.{parts['MINOR']}.{parts['BUGFIX']}"
    if parts["DEV"] is not None:
        version += f".dev{parts['DEV']}"
    return VersionString(version)


class Application:
    """An application rooted at ``root`` with its config and version file."""

    def __init__(self, root: str | Path, *, settings: cfg.Settings | None = None) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise PreconditionError(f"Application root not found: {self.root}")
        self.settings = settings or cfg.CONFIG
        self._config: AppConfig | None = None
        self._version: VersionString | None = None
        self._version_loaded = False

    @property
    def version_file(self) -> Path:
        return self.root / self.settings.VERSION_FILE

    @property
    def config_file(self) -> Path:
        return self.root / self.settings.APP_CONFIG_FILE

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload_config(self) -> AppConfig:
        self._config = self._load_config()
        return self._config

    def _load_config(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self.config_file.exists():
            raw = _load_yaml(self.config_file)
            if not isinstance(raw, dict):
                raise PreconditionError(
                    f"Application config must be a mapping: {self.config_file}"
                )
            data = raw
        return AppConfig(**data)

    @property
    def namespace(self) -> str:
        return camelize(self.config.name or self.root.resolve().name) or "App"

    def version(self, *, refresh: bool = False) -> VersionString | None:
        """Return the version declared in the version file.

        The result is cached; pass ``refresh=True`` to re-read the file.
        """
        if refresh or not self._version_loaded:
            self._version = self._read_version()
            self._version_loaded = True
        return self._version

    def _read_version(self) -> VersionString | None:
        path = self.version_file
        if not path.exists():
            logger.debug(f"No version file at {path}")
            return None
        version = parse_version_file(path.read_text(encoding="utf-8"))
        if version is None:
            logger.warning(f"No version declared in {path}")
        return version

    def __repr__(self) -> str:
        return f"Application(root={str(self.root)!r})"
