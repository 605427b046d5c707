"""Bootstrap — composition root wiring adapters and conventions into a locator."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from artifact_locator.app.settings import LocatorSettings
from artifact_locator.application.conventions import (
    SimpleFilesystemConvention,
    VEXCodeFilesystemConvention,
    VexideFilesystemConvention,
)
from artifact_locator.application.locator import RecentCodeObjectLocator
from artifact_locator.domain.errors import ConfigurationError
from artifact_locator.domain.ports import FilesystemConvention
from artifact_locator.infrastructure.adapters.aiofiles_stat import AiofilesStat
from artifact_locator.infrastructure.adapters.local_file_search import LocalFileSearch
from artifact_locator.infrastructure.adapters.yaml_convention_catalog import YamlConventionCatalog

logger = logging.getLogger(__name__)

CUSTOM_CONVENTION_NAME = "custom"


@dataclass(frozen=True)
class LocatorContainer:
    """Wired discovery components."""

    settings: LocatorSettings
    search: LocalFileSearch
    stat: AiofilesStat
    locator: RecentCodeObjectLocator


def create_locator(settings: LocatorSettings | None = None) -> LocatorContainer:
    """Wire adapters and conventions and return a ready locator.

    If no settings are provided, loads from environment/.env.
    Conventions are ordered: vexide, VEXCode, custom, then catalog entries.
    """
    if settings is None:
        settings = LocatorSettings()

    search = LocalFileSearch()
    stat = AiofilesStat()

    conventions: list[FilesystemConvention] = []
    if settings.enable_vexide:
        conventions.append(VexideFilesystemConvention(search, target_triple=settings.vexide_target_triple))
    if settings.enable_vexcode:
        conventions.append(VEXCodeFilesystemConvention(search))
    if settings.extra_paths:
        conventions.append(SimpleFilesystemConvention(CUSTOM_CONVENTION_NAME, settings.extra_paths))
    if settings.conventions_file is not None:
        conventions.extend(YamlConventionCatalog(settings.conventions_file).load())

    if not conventions:
        raise ConfigurationError("No filesystem conventions enabled, nothing to search")

    locator = RecentCodeObjectLocator(
        conventions,
        stat=stat,
        max_concurrent_stats=settings.max_concurrent_stats,
    )
    logger.info("Configured locator: %s", locator.name)
    return LocatorContainer(settings=settings, search=search, stat=stat, locator=locator)
