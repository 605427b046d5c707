"""RecentCodeObjectLocator — rank code objects from every convention by recency."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from artifact_locator.domain.errors import StatError
from artifact_locator.domain.models import TimestampedLocation

if TYPE_CHECKING:
    from artifact_locator.domain.ports import CodeObjectLocator, FilesystemConvention, FileStatPort

logger = logging.getLogger(__name__)

_DEFAULT_MAX_CONCURRENT_STATS = 64


class RecentCodeObjectLocator:
    """Locates the most recent code objects in a project.

    Every configured convention is searched on each call; candidates that
    exist are ordered newest first. Nothing is cached between calls.
    """

    if TYPE_CHECKING:
        _protocol_check: CodeObjectLocator

    def __init__(
        self,
        conventions: Sequence[FilesystemConvention],
        stat: FileStatPort,
        max_concurrent_stats: int = _DEFAULT_MAX_CONCURRENT_STATS,
    ) -> None:
        if max_concurrent_stats < 1:
            raise ValueError(f"max_concurrent_stats must be >= 1, got {max_concurrent_stats}")
        self._conventions: tuple[FilesystemConvention, ...] = tuple(conventions)
        self._stat = stat
        self._max_concurrent_stats = max_concurrent_stats

    @property
    def conventions(self) -> tuple[FilesystemConvention, ...]:
        """The filesystem conventions considered while searching, in configured order."""
        return self._conventions

    @property
    def name(self) -> str:
        return f"Recent Files ({', '.join(c.name for c in self._conventions)})"

    async def find_object_locations(self, root: Path) -> list[Path]:
        """Search ``root`` with every convention and return existing files, newest first.

        Search failures propagate. Candidates that cannot be stat'ed are dropped.
        Ties keep convention order, then each convention's own result order.
        """
        limiter = asyncio.Semaphore(self._max_concurrent_stats)
        per_convention = await asyncio.gather(
            *(self._timestamped_with(convention, root, limiter) for convention in self._conventions)
        )

        merged = [entry for entries in per_convention for entry in entries]
        # Big timestamp (more recent) first; sorted() is stable.
        ranked = sorted(merged, key=lambda entry: entry.timestamp, reverse=True)
        logger.debug("%s ranked %d code object(s) in %s", self.name, len(ranked), root)
        return [entry.location for entry in ranked]

    async def get_timestamped_locations(
        self, convention: FilesystemConvention, root: Path
    ) -> list[TimestampedLocation]:
        """Use one convention to find files which actually exist on the filesystem.

        Returns the timestamped files in the convention's own order, unsorted.
        """
        return await self._timestamped_with(convention, root, asyncio.Semaphore(self._max_concurrent_stats))

    async def _timestamped_with(
        self,
        convention: FilesystemConvention,
        root: Path,
        limiter: asyncio.Semaphore,
    ) -> list[TimestampedLocation]:
        locations = await convention.get_locations(root)
        resolved = await asyncio.gather(*(self._resolve(location, limiter) for location in locations))
        found = [entry for entry in resolved if entry is not None]
        logger.debug(
            "Convention %s: %d candidate(s), %d on disk",
            convention.name,
            len(locations),
            len(found),
        )
        return found

    async def _resolve(self, location: Path, limiter: asyncio.Semaphore) -> TimestampedLocation | None:
        async with limiter:
            try:
                stat = await self._stat.stat(location)
            except (OSError, StatError) as exc:
                logger.debug("Dropping %s: %s", location, exc)
                return None
        return TimestampedLocation(location=location, timestamp=stat.mtime_ms)
