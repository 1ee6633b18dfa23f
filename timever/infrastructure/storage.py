"""Shared file-system helpers for generated files and config edits."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List

import yaml

from timever.logutils import logger

PathLike = str | Path


def write_text(path: PathLike, text: str) -> Path:
    """Replace ``path`` with ``text`` using an atomic write.

    The parent directory must already exist; a missing or read-only directory
    raises :class:`OSError`. Any previous file is overwritten.
    """

    p = Path(path)
    tmp = p.with_name(f"temp_{p.name}")
    try:
        with tmp.open("w", encoding="utf-8") as handle:
            handle.write(text)
        tmp.replace(p)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {len(text)} chars to {p}")
    return p


def _read_lines(path: Path) -> List[str]:
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}\s*:")


def comment_config_key(path: PathLike, key: str) -> int:
    """Comment out every top-level ``key:`` line in the YAML file at ``path``.

    Returns the number of lines commented.
    """

    p = Path(path)
    pattern = _key_pattern(key)
    lines = _read_lines(p)
    count = 0
    for idx, line in enumerate(lines):
        if pattern.match(line):
            lines[idx] = f"# {line}"
            count += 1
    if count:
        write_text(p, "\n".join(lines) + "\n")
    return count


def format_config_value(key: str, value: Any) -> str:
    """Return ``key: value`` rendered as a single YAML line."""

    rendered = yaml.safe_dump(
        {key: value}, default_flow_style=True, sort_keys=False
    ).strip()
    # safe_dump wraps flow mappings in braces: {key: value}
    return rendered[1:-1].strip()


def add_config_key(path: PathLike, key: str, value: Any) -> str:
    """Append ``key: value`` to the YAML file at ``path``, creating it if needed."""

    p = Path(path)
    lines = _read_lines(p)
    line = format_config_value(key, value)
    lines.append(line)
    write_text(p, "\n".join(lines) + "\n")
    return line
