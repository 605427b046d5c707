"""Shared test fixtures for the locator test suite."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from artifact_locator.domain.models import FileStat

FileFactory = Callable[..., Path]


@pytest.fixture
def make_file(tmp_path: Path) -> FileFactory:
    """Factory creating ``tmp_path / relative`` with a chosen mtime (epoch milliseconds)."""

    def _make(relative: str, mtime_ms: int | None = None, content: str = "elf") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if mtime_ms is not None:
            os.utime(path, ns=(mtime_ms * 1_000_000, mtime_ms * 1_000_000))
        return path

    return _make


class FakeStat:
    """In-memory FileStatPort: known paths resolve, everything else is missing."""

    def __init__(self, mtimes: dict[Path, int] | None = None, failing: dict[Path, Exception] | None = None) -> None:
        self.mtimes = dict(mtimes or {})
        self.failing = dict(failing or {})
        self.calls: list[Path] = []

    async def stat(self, location: Path) -> FileStat:
        self.calls.append(location)
        if location in self.failing:
            raise self.failing[location]
        if location not in self.mtimes:
            raise FileNotFoundError(location)
        return FileStat(mtime_ms=self.mtimes[location])


class FakeConvention:
    """FilesystemConvention returning a fixed list, or raising."""

    def __init__(self, name: str, locations: list[Path] | None = None, error: Exception | None = None) -> None:
        self.name = name
        self._locations = list(locations or [])
        self._error = error

    async def get_locations(self, root: Path) -> list[Path]:
        if self._error is not None:
            raise self._error
        return list(self._locations)


@pytest.fixture
def fake_stat() -> FakeStat:
    """Stat port with no known paths; tests register mtimes on ``.mtimes``."""
    return FakeStat()


@pytest.fixture
def make_convention() -> Callable[..., FakeConvention]:
    return FakeConvention
