"""Unified command line entry point using ``argparse``."""
from __future__ import annotations

import argparse
import sys

from timever.app import Application, PreconditionError
from timever.generators import get_generator
from timever.logutils import logger, setup_logging
from timever.version_string import InvalidVersionFormat


def _generate(args: argparse.Namespace) -> int:
    options = {}
    if args.change is not None:
        options["change"] = args.change
    try:
        generator_cls = get_generator(args.generator)
    except KeyError as exc:
        logger.error(str(exc.args[0]))
        return 1
    try:
        app = Application(args.root)
        generator_cls(app, options).invoke()
    except (PreconditionError, InvalidVersionFormat, OSError) as exc:
        logger.error(f"{args.generator} failed: {exc}")
        return 1
    return 0


def _show_version(args: argparse.Namespace) -> int:
    try:
        app = Application(args.root)
    except PreconditionError as exc:
        logger.error(str(exc))
        return 1
    version = app.version()
    if version is None:
        print(f"No version declared in {app.version_file}")
        return 1
    print(version)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="timever code generators")
    sub = parser.add_subparsers(dest="cmd")

    sub_gen = sub.add_parser("generate", help="Run a code generator")
    sub_gen.add_argument("generator", nargs="?", default="timever", help="Generator name")
    sub_gen.add_argument("--root", default=".", help="Application root directory")
    sub_gen.add_argument("--change", help="Write this version instead of deriving one")
    sub_gen.set_defaults(func=_generate)

    sub_show = sub.add_parser("show-version", help="Print the current app version")
    sub_show.add_argument("--root", default=".", help="Application root directory")
    sub_show.set_defaults(func=_show_version)

    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    setup_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
