"""Domain models — frozen dataclasses for discovery value objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileStat:
    """Metadata returned by the stat port for an existing path.

    ``mtime_ms`` is epoch milliseconds and is negative for files dated before 1970.
    """

    mtime_ms: int


@dataclass(frozen=True)
class TimestampedLocation:
    """A candidate location confirmed to exist, with its modification time.

    Only lives for the duration of one discovery pass.
    """

    location: Path
    timestamp: int
