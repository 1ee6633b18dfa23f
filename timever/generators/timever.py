"""Convert an application to timestamp versioning.

The generator rewrites ``config/version.rb`` with a timestamp version
(``Rel202001011200`` / ``Dev202001011200``). Running it on an application that
still uses the legacy ``MAJOR``/``MINOR``/``BUGFIX`` version file also brings
that file up to the current layout.
"""

from __future__ import annotations

from pathlib import Path

from timever.app import Application, PreconditionError
from timever.generators.base import CodeGenerator, GeneratorOptions
from timever.logutils import log_result, logger
from timever.version_string import VersionString


@log_result
def select_version(
    options: GeneratorOptions, current_version: VersionString | None
) -> VersionString:
    """Return the version the application should be written with.

    An explicit ``change`` wins and is not validated. Otherwise a timestamp
    version is kept as-is and anything else is replaced by a fresh production
    or development timestamp.
    """
    if options.change is not None:
        version = VersionString(options.change)
        if not (version.is_timestamp() or version.is_semantic()):
            logger.warning(f"Writing unrecognised version format: {version}")
        return version
    if current_version is None:
        raise PreconditionError(
            "Cannot determine the current application version; pass change=<version>"
        )
    if current_version.is_timestamp():
        return current_version
    if current_version.is_production():
        return VersionString.production_timestamp()
    return VersionString.development_timestamp()


def report_version(app: Application) -> VersionString | None:
    version = app.version(refresh=True)
    print()
    print(f"Your new app version is: {version}")
    return version


class VersionFileGenerator(CodeGenerator):
    name = "timever"
    description = (
        "Convert an application to timestamp (Rel202001011200) versioning. "
        "Also brings a legacy version file up to date with the latest structure."
    )
    steps = ("create_version_file", "set_configuration", "print_version")

    version: VersionString | None = None

    def create_version_file(self) -> None:
        current = None if self.options.change is not None else self.app.version()
        self.version = select_version(self.options, current)
        self.write_version_file(self.app.version_file, self.version)

    def write_version_file(self, path: str | Path, version: VersionString) -> Path:
        """Render the version file for ``version`` to ``path``, replacing it."""
        return self.template(
            self.app.settings.VERSION_TEMPLATE,
            path,
            force=True,
            namespace=self.app.namespace,
            version=version,
        )

    def set_configuration(self) -> None:
        self.migrate_semantic_flag()

    def migrate_semantic_flag(self) -> bool:
        """Switch ``semantically_version`` off, keeping the old line as a comment.

        Returns ``True`` when the config was changed.
        """
        if not self.app.config.semantically_version:
            return False
        self.comment_config("semantically_version")
        self.add_config("semantically_version", False)
        return True

    def print_version(self) -> None:
        report_version(self.app)
