"""Templates rendered by the code generators."""

from __future__ import annotations

from typing import Any, Dict

TEMPLATES: Dict[str, str] = {
    "version_time.rb": (
        "module {namespace}\n"
        '  VERSION = "{version}"\n'
        "end\n"
    ),
}


def escape_string(value: Any) -> str:
    """Return ``value`` escaped for use inside a double-quoted string literal."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def render(name: str, **context: Any) -> str:
    """Return template ``name`` filled with ``context``.

    Values are escaped so they stay inside their quoted literal. Raises
    ``KeyError`` for an unknown template or a missing placeholder.
    """
    try:
        source = TEMPLATES[name]
    except KeyError:
        raise KeyError(f"Unknown template: {name}") from None
    return source.format(**{key: escape_string(val) for key, val in context.items()})
