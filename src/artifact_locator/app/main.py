"""Main entry point — ``python3 -m artifact_locator.app.main [PROJECT_DIR]``.

Prints the code objects found in a project, most recently modified first.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from artifact_locator.app.bootstrap import create_locator
from artifact_locator.app.settings import LocatorSettings
from artifact_locator.domain.errors import ConfigurationError, LocatorError

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artifact-locator",
        description="List build artifacts in a project, most recently modified first.",
    )
    parser.add_argument("project_dir", nargs="?", type=Path, default=Path.cwd(), help="Project root to search")
    parser.add_argument("--limit", type=int, default=None, help="Print at most N artifacts")
    parser.add_argument("--target-triple", default=None, help="Override the cargo target triple directory")
    parser.add_argument("--conventions-file", type=Path, default=None, help="YAML catalog of extra conventions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log discovery details to stderr")
    return parser


def _settings_from_args(args: argparse.Namespace) -> LocatorSettings:
    overrides: dict[str, object] = {}
    if args.target_triple:
        overrides["vexide_target_triple"] = args.target_triple
    if args.conventions_file is not None:
        overrides["conventions_file"] = args.conventions_file
    try:
        return LocatorSettings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid locator settings: {exc}") from exc


async def run(args: argparse.Namespace) -> int:
    """Run one discovery pass and print the ranked paths."""
    try:
        container = create_locator(_settings_from_args(args))
        locations = await container.locator.find_object_locations(args.project_dir.resolve())
    except LocatorError as exc:
        logger.error("Could not search for build artifacts: %s", exc.message)
        return EXIT_ERROR

    if args.limit is not None:
        locations = locations[: max(args.limit, 0)]
    if not locations:
        logger.warning("No build artifacts found in %s", args.project_dir)
        return EXIT_NOT_FOUND

    for location in locations:
        print(location)
    return EXIT_FOUND


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
