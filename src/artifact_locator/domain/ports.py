"""Domain ports — Protocol interfaces for hexagonal architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from artifact_locator.domain.models import FileStat


@runtime_checkable
class FileSearchPort(Protocol):
    """Match a glob pattern against the filesystem below a root directory."""

    async def search_files(self, root: Path, pattern: str) -> list[Path]:
        """Return every file under ``root`` matching ``pattern``.

        Args:
            root: Directory the pattern is relative to.
            pattern: Glob supporting ``*`` segments and ``{a,b}`` alternation.

        Returns:
            Matching paths; an empty list when nothing matches.

        Raises:
            SearchError: The root is inaccessible or the pattern is invalid.
        """
        ...


@runtime_checkable
class FileStatPort(Protocol):
    """Read the modification time of a path."""

    async def stat(self, location: Path) -> FileStat: ...


@runtime_checkable
class FilesystemConvention(Protocol):
    """A convention for where one toolchain stores its code objects."""

    @property
    def name(self) -> str: ...

    async def get_locations(self, root: Path) -> list[Path]:
        """Return possible code object locations under ``root``.

        Locations are not guaranteed to exist.
        """
        ...


@runtime_checkable
class CodeObjectLocator(Protocol):
    """Find code objects in a project, best candidate first."""

    @property
    def name(self) -> str: ...

    async def find_object_locations(self, root: Path) -> list[Path]: ...
