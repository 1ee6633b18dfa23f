"""Base class for code generators operating on an :class:`Application`."""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping, Tuple

from pydantic import BaseModel

from timever import templates
from timever.app import Application
from timever.infrastructure.storage import add_config_key, comment_config_key, write_text
from timever.logutils import logger


class GeneratorOptions(BaseModel):
    """Options passed to a generator by the invoking pipeline."""

    change: str | None = None

    model_config = {
        "extra": "ignore",
    }


class CodeGenerator:
    """Run ``steps`` in order against ``app``.

    Subclasses list the names of their step methods in ``steps``; each one is
    called exactly once by :meth:`invoke`. Errors propagate unchanged.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    steps: ClassVar[Tuple[str, ...]] = ()

    def __init__(
        self,
        app: Application,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self.app = app
        if options is None:
            options = GeneratorOptions()
        elif not isinstance(options, GeneratorOptions):
            options = GeneratorOptions(**dict(options))
        self.options = options

    def invoke(self) -> None:
        for step in self.steps:
            logger.debug(f"[{self.name}] {step}")
            getattr(self, step)()

    # File helpers ---------------------------------------------------------

    def template(
        self,
        name: str,
        destination: str | Path,
        *,
        force: bool = False,
        **context: Any,
    ) -> Path:
        """Render template ``name`` to ``destination``."""
        dest = Path(destination)
        if dest.exists() and not force:
            raise FileExistsError(f"{dest} already exists")
        action = "force" if dest.exists() else "create"
        path = write_text(dest, templates.render(name, **context))
        logger.info(f"{action:>8}  {self._relative(path)}")
        return path

    def comment_config(self, key: str) -> None:
        """Comment out ``key`` in the application config file."""
        count = comment_config_key(self.app.config_file, key)
        if count:
            logger.info(f"{'comment':>8}  {key} in {self._relative(self.app.config_file)}")
        self.app.reload_config()

    def add_config(self, key: str, value: Any) -> None:
        """Append ``key: value`` to the application config file."""
        line = add_config_key(self.app.config_file, key, value)
        logger.info(f"{'append':>8}  {line} to {self._relative(self.app.config_file)}")
        self.app.reload_config()

    def _relative(self, path: Path) -> str:
        try:
            return str(path.relative_to(self.app.root))
        except ValueError:
            return str(path)
