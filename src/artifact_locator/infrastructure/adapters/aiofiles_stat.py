"""AiofilesStat — FileStatPort implementation using aiofiles.os."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles.os

from artifact_locator.domain.models import FileStat

if TYPE_CHECKING:
    from artifact_locator.domain.ports import FileStatPort

_NS_PER_MS = 1_000_000


class AiofilesStat:
    """Read modification times without blocking the event loop.

    Raises FileNotFoundError (or another OSError) unchanged when the path
    cannot be stat'ed; the locator treats that as "not there".
    """

    if TYPE_CHECKING:
        _protocol_check: FileStatPort

    async def stat(self, location: Path) -> FileStat:
        result = await aiofiles.os.stat(location)
        return FileStat(mtime_ms=result.st_mtime_ns // _NS_PER_MS)
