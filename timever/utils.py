import os
import re
from datetime import datetime


def now() -> datetime:
    """Return ``TIMEVER_NOW`` or the current local time."""

    env = os.getenv("TIMEVER_NOW")
    if env:
        return datetime.strptime(env, "%Y-%m-%d %H:%M")
    return datetime.now()


def camelize(value: str) -> str:
    """Return ``value`` converted from snake/kebab case to ``CamelCase``."""

    parts = [p for p in re.split(r"[^0-9A-Za-z]+", value) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)
