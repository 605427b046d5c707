"""LocalFileSearch — FileSearchPort implementation over pathlib globbing."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from artifact_locator.application.glob_patterns import expand_braces
from artifact_locator.domain.errors import InvalidPatternError, SearchError

if TYPE_CHECKING:
    from artifact_locator.domain.ports import FileSearchPort

logger = logging.getLogger(__name__)


class LocalFileSearch:
    """Match root-relative glob patterns against the local filesystem.

    Brace groups are expanded up front and each alternative is handed to
    ``Path.glob``. Only regular files are returned, sorted by path so repeated
    scans of an unchanged tree list candidates in the same order. All
    directory walking runs in a worker thread via asyncio.to_thread.
    """

    if TYPE_CHECKING:
        _protocol_check: FileSearchPort

    async def search_files(self, root: Path, pattern: str) -> list[Path]:
        alternatives = _validated_alternatives(pattern)
        return await asyncio.to_thread(self._search_sync, root, alternatives)

    def _search_sync(self, root: Path, alternatives: list[str]) -> list[Path]:
        """Blocking glob walk, called via to_thread."""
        try:
            if not root.is_dir():
                raise SearchError(f"Search root is not a directory: {root}")
            matches: set[Path] = set()
            for alternative in alternatives:
                matches.update(path for path in root.glob(alternative) if path.is_file())
        except OSError as exc:
            raise SearchError(f"Failed to search {root}: {exc}") from exc

        logger.debug("Matched %d file(s) under %s", len(matches), root)
        return sorted(matches)


def _validated_alternatives(pattern: str) -> list[str]:
    """Expand ``pattern`` and reject alternatives that could escape the root."""
    alternatives = expand_braces(pattern)
    for alternative in alternatives:
        if not alternative:
            raise InvalidPatternError(f"Glob pattern expands to an empty alternative: {pattern!r}")
        pure = PurePosixPath(alternative)
        if pure.is_absolute():
            raise InvalidPatternError(f"Glob pattern must be relative to the search root: {pattern!r}")
        if ".." in pure.parts:
            raise InvalidPatternError(f"Glob pattern must not contain '..': {pattern!r}")
    return alternatives
