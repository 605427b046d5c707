"""YamlConventionCatalog — user-defined fixed-path conventions from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from artifact_locator.application.conventions import SimpleFilesystemConvention
from artifact_locator.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class YamlConventionCatalog:
    """Load fixed-path conventions declared in a YAML mapping.

    The file maps a convention name to a list of root-relative paths::

        pros:
          - bin/monolith.elf
          - bin/hot.package.elf

    A missing or empty file yields no conventions.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[SimpleFilesystemConvention]:
        """Parse the catalog (blocking I/O, read once at startup)."""
        if not self._path.exists():
            logger.info("Convention catalog %s not found, no custom conventions loaded", self._path)
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
            data: Any = yaml.safe_load(text) if text.strip() else None
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Cannot read convention catalog {self._path}: {exc}") from exc

        if data is None:
            return []
        if not isinstance(data, dict):
            raise ConfigurationError(f"Convention catalog {self._path} must be a mapping of name -> paths")

        conventions = [
            SimpleFilesystemConvention(str(name), self._validate_paths(str(name), paths))
            for name, paths in data.items()
        ]
        logger.info("Loaded %d convention(s) from %s", len(conventions), self._path)
        return conventions

    def _validate_paths(self, name: str, paths: Any) -> list[str]:
        if not isinstance(paths, list):
            raise ConfigurationError(f"Convention {name!r} in {self._path} must list its paths")
        for entry in paths:
            if not isinstance(entry, str) or not entry:
                raise ConfigurationError(f"Convention {name!r} has a non-string path entry: {entry!r}")
            if PurePosixPath(entry).is_absolute():
                raise ConfigurationError(f"Convention {name!r} path must be relative: {entry!r}")
        return paths
