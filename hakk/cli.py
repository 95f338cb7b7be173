"""hakk command line interface.

Usage::

    hakk my-project
    hakk my-project --org com.example --scala 2.11.8 --no-git
    hakk --install --org com.example --akka 2.4.1
"""

from __future__ import annotations

import argparse
import asyncio
import os
from pathlib import Path

from hakk import __version__
from hakk.config import ConfigOverrides, resolve_generate, resolve_install
from hakk.errors import HakkError, ScaffoldError
from hakk.scaffolder import ProjectGenerator
from hakk.store import ConfigStore
from hakk.utils import print_error, print_success, print_summary_table
from hakk.vcs import init_repository


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``hakk``."""
    parser = argparse.ArgumentParser(
        prog="hakk",
        description="Quick and simplistic Akka project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  hakk my-project\n"
            "  hakk my-project --org com.example --ver 1.0.0 --no-git\n"
            "  hakk --install --org com.example --scala 2.11.8\n"
        ),
    )

    parser.add_argument(
        "project_name",
        nargs="?",
        metavar="PROJECT_NAME",
        help="Name of the project (and the name of the target directory)",
    )
    parser.add_argument(
        "--install",
        action="store_true",
        help="Save passed arguments in ~/.hakk (does not create project)",
    )
    parser.add_argument(
        "--org",
        default=None,
        help="Change organization of the project (defaults to the project name)",
    )
    parser.add_argument(
        "--ver",
        default=None,
        help="Change the initial project version (defaults to 0.1-SNAPSHOT)",
    )
    parser.add_argument(
        "--akka",
        default=None,
        help="Set Akka version (defaults to value in ~/.hakk or 2.4.0)",
    )
    parser.add_argument(
        "--scala",
        default=None,
        help="Set Scala version (defaults to value in ~/.hakk or 2.11.7)",
    )
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Do not create a git repository",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject flag combinations argparse cannot express on its own."""
    if args.install:
        if args.project_name is not None:
            parser.error("argument --install: not allowed with argument PROJECT_NAME")
        if args.ver is not None:
            parser.error("argument --install: not allowed with argument --ver")
        if args.no_git:
            parser.error("argument --install: not allowed with argument --no-git")
    elif not args.project_name:
        parser.error("the following arguments are required: PROJECT_NAME")


async def _generate(
    project_name: str, args: argparse.Namespace, store: ConfigStore
) -> None:
    overrides = ConfigOverrides(
        organization=args.org,
        project_version=args.ver,
        scala_version=args.scala,
        akka_version=args.akka,
    )
    config = resolve_generate(project_name, store.load(), overrides)

    generator = ProjectGenerator()
    project_root = await generator.generate(project_name, config, Path("."))

    try:
        os.chdir(project_root)
    except OSError as exc:
        raise ScaffoldError(
            f"Could not change directory to {project_root}: {exc}", path=project_root
        ) from exc

    if not args.no_git:
        await init_repository(Path.cwd())

    print_success(f"Created project {project_name} in {project_root}")
    print_summary_table(config.as_dict(), title=project_name)


def _install(args: argparse.Namespace, store: ConfigStore) -> None:
    overrides = ConfigOverrides(
        organization=args.org,
        scala_version=args.scala,
        akka_version=args.akka,
    )
    store.save(resolve_install(store.load(), overrides))


def main(argv: list[str] | None = None, store: ConfigStore | None = None) -> int:
    """CLI entry point for ``hakk`` and ``python -m hakk``.

    Returns:
        The process exit status: 0 on success, 1 on any fatal error.
        Usage errors exit with status 2 from inside argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_args(parser, args)

    store = store or ConfigStore()

    try:
        if args.install:
            _install(args, store)
        else:
            asyncio.run(_generate(args.project_name, args, store))
    except HakkError as exc:
        print_error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
