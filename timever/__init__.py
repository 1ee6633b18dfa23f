"""timever code generators.

Importing :mod:`timever` exposes the version descriptor type and the
application context used by the generators.
"""

from .app import Application, PreconditionError
from .version_string import InvalidVersionFormat, VersionString

__all__ = ["Application", "PreconditionError", "InvalidVersionFormat", "VersionString"]
