"""Version descriptors in semantic or timestamp form.

``VersionString`` is a plain :class:`str` that knows how to classify itself.
Two families are understood:

* timestamp versions, ``Rel202001011200`` for releases and
  ``Dev202001011200`` for in-progress builds (the legacy
  ``sm_2020_01_01_12_00`` layout counts as a release timestamp)
* semantic versions, ``1.2.3`` for releases and ``1.2.3.dev4``,
  ``1.2.3.pre4`` or anything below ``1.0.0`` for development builds

Construction never validates. Text that matches neither family only fails
once its production status is requested.
"""

from __future__ import annotations

import re
from datetime import datetime

from timever.config import get as cfg_get
from timever.utils import now as _now


class InvalidVersionFormat(ValueError):
    """Raised when a version descriptor is not a recognised format."""


_SEMANTIC_RE = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<bugfix>\d+)"
    r"(?:\.(?P<tag>dev|pre)(?P<build>\d+))?$"
)
_LEGACY_TIMESTAMP_RE = re.compile(r"^sm_\d{4}_\d{2}_\d{2}_\d{2}_\d{2}$")


def _timestamp_prefix(value: str) -> str | None:
    """Return the release/development prefix of timestamp ``value`` or ``None``.

    The part after the prefix must parse with the ``TIMESTAMP_FORMAT`` setting.
    """
    fmt = cfg_get("TIMESTAMP_FORMAT", "%Y%m%d%H%M")
    for prefix in (cfg_get("PRODUCTION_PREFIX", "Rel"), cfg_get("DEVELOPMENT_PREFIX", "Dev")):
        if not prefix or not value.startswith(prefix):
            continue
        try:
            datetime.strptime(value[len(prefix):], fmt)
        except ValueError:
            continue
        return prefix
    return None


class VersionString(str):
    """A version descriptor with classification helpers."""

    @classmethod
    def production_timestamp(cls, now: datetime | None = None) -> "VersionString":
        """Return a release timestamp version for ``now``."""
        return cls._timestamp(cfg_get("PRODUCTION_PREFIX", "Rel"), now)

    @classmethod
    def development_timestamp(cls, now: datetime | None = None) -> "VersionString":
        """Return a development timestamp version for ``now``."""
        return cls._timestamp(cfg_get("DEVELOPMENT_PREFIX", "Dev"), now)

    @classmethod
    def _timestamp(cls, prefix: str, now: datetime | None) -> "VersionString":
        moment = now or _now()
        return cls(prefix + moment.strftime(cfg_get("TIMESTAMP_FORMAT", "%Y%m%d%H%M")))

    def is_timestamp(self) -> bool:
        return _timestamp_prefix(self) is not None or bool(_LEGACY_TIMESTAMP_RE.match(self))

    def is_semantic(self) -> bool:
        return bool(_SEMANTIC_RE.match(self))

    def is_production(self) -> bool:
        """Return ``True`` for release versions.

        Raises :class:`InvalidVersionFormat` for unrecognised text.
        """
        if _LEGACY_TIMESTAMP_RE.match(self):
            return True
        prefix = _timestamp_prefix(self)
        if prefix is not None:
            return prefix == cfg_get("PRODUCTION_PREFIX", "Rel")
        match = _SEMANTIC_RE.match(self)
        if match:
            return match.group("tag") is None and int(match.group("major")) >= 1
        raise InvalidVersionFormat(f"Unrecognised version format: {str(self)!r}")

    def is_development(self) -> bool:
        return not self.is_production()

    def validate(self) -> "VersionString":
        """Return ``self`` when recognised, raise :class:`InvalidVersionFormat` otherwise."""
        self.is_production()
        return self

    def __repr__(self) -> str:
        return f"VersionString({str(self)!r})"
