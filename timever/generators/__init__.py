"""Code generators available to the ``timever`` command line."""

from __future__ import annotations

from typing import Dict, Type

from .base import CodeGenerator, GeneratorOptions
from .timever import VersionFileGenerator

GENERATORS: Dict[str, Type[CodeGenerator]] = {
    VersionFileGenerator.name: VersionFileGenerator,
}


def get_generator(name: str) -> Type[CodeGenerator]:
    """Return the generator class registered as ``name``."""
    try:
        return GENERATORS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise KeyError(f"Unknown generator {name!r} (known: {known})") from None


__all__ = [
    "CodeGenerator",
    "GeneratorOptions",
    "VersionFileGenerator",
    "GENERATORS",
    "get_generator",
]
