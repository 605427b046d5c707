"""Filesystem conventions — where each toolchain leaves its code objects."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from artifact_locator.application.glob_patterns import describe_pattern

if TYPE_CHECKING:
    from artifact_locator.domain.ports import FileSearchPort, FilesystemConvention

logger = logging.getLogger(__name__)

DEFAULT_VEXIDE_TARGET_TRIPLE = "armv7a-vex-v5"

# ELF files generated by cargo never have file extensions or dashes in their names.
_CARGO_INTERMEDIATE_NAME = re.compile(r"[.\-]")


def _format_locations(locations: Sequence[Path]) -> str:
    return "\n".join(str(location) for location in locations)


class SimpleFilesystemConvention:
    """A convention described by a fixed list of paths relative to the project root.

    Existence is not checked here; the locator drops paths that fail to stat.
    """

    if TYPE_CHECKING:
        _protocol_check: FilesystemConvention

    def __init__(self, name: str, paths: Sequence[str | Path]) -> None:
        self._name = name
        self._paths: tuple[Path, ...] = tuple(Path(p) for p in paths)

    @property
    def name(self) -> str:
        return self._name

    @property
    def paths(self) -> tuple[Path, ...]:
        """Code object paths relative to the directory being searched."""
        return self._paths

    async def get_locations(self, root: Path) -> list[Path]:
        return [root / path for path in self._paths]


class VexideFilesystemConvention:
    """Finds code objects generated by cargo-v5, vexide's build tool.

    Cargo writes linked executables next to intermediate files such as
    ``foo.d`` and ``libfoo-1a2b.rlib``. The executables are the only entries
    without a ``.`` or ``-`` in their name, so everything else is filtered out.
    """

    name = "vexide"

    def __init__(self, search: FileSearchPort, target_triple: str = DEFAULT_VEXIDE_TARGET_TRIPLE) -> None:
        self._search = search
        self._pattern = f"target/{target_triple}/{{debug,release}}/{{examples/*,*}}"

    @property
    def pattern(self) -> str:
        return self._pattern

    async def get_locations(self, root: Path) -> list[Path]:
        logger.debug("Searching for vexide files with pattern %s", describe_pattern(root, self._pattern))

        files = await self._search.search_files(root, self._pattern)
        logger.debug(
            "Found these files using vexide convention, before filtering out files with extensions:\n%s",
            _format_locations(files),
        )

        filtered = [file for file in files if is_cargo_executable_name(file.name)]
        logger.debug(
            "Found these files using vexide convention, after removing files with extensions:\n%s",
            _format_locations(filtered),
        )
        return filtered


class VEXCodeFilesystemConvention:
    """Finds code objects generated by VEXCode's Makefile."""

    name = "VEXCode"

    # VEXCode naming for ELF files is inconsistent, but they're always in `build/`.
    pattern = "build/*.elf"

    def __init__(self, search: FileSearchPort) -> None:
        self._search = search

    async def get_locations(self, root: Path) -> list[Path]:
        logger.debug("Searching for VEXCode files with pattern %s", describe_pattern(root, self.pattern))
        return await self._search.search_files(root, self.pattern)


def is_cargo_executable_name(basename: str) -> bool:
    """True when ``basename`` looks like a linked cargo executable (no ``.``, no ``-``)."""
    return _CARGO_INTERMEDIATE_NAME.search(basename) is None
