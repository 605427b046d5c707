"""Tests for bootstrap — composition root wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from artifact_locator.app.bootstrap import CUSTOM_CONVENTION_NAME, create_locator
from artifact_locator.app.settings import LocatorSettings
from artifact_locator.application.conventions import (
    SimpleFilesystemConvention,
    VEXCodeFilesystemConvention,
    VexideFilesystemConvention,
)
from artifact_locator.domain.errors import ConfigurationError


class TestCreateLocator:
    def test_default_wiring(self) -> None:
        container = create_locator(LocatorSettings())

        conventions = container.locator.conventions
        assert isinstance(conventions[0], VexideFilesystemConvention)
        assert isinstance(conventions[1], VEXCodeFilesystemConvention)
        assert container.locator.name == "Recent Files (vexide, VEXCode)"

    def test_target_triple_forwarded(self) -> None:
        container = create_locator(LocatorSettings(vexide_target_triple="t"))
        vexide = container.locator.conventions[0]
        assert isinstance(vexide, VexideFilesystemConvention)
        assert vexide.pattern.startswith("target/t/")

    def test_extra_paths_become_custom_convention(self) -> None:
        container = create_locator(LocatorSettings(enable_vexide=False, extra_paths=["bin/app.elf"]))

        names = [c.name for c in container.locator.conventions]
        assert names == ["VEXCode", CUSTOM_CONVENTION_NAME]

    def test_catalog_conventions_appended_last(self, tmp_path: Path) -> None:
        catalog = tmp_path / "conventions.yaml"
        catalog.write_text("pros:\n  - bin/monolith.elf\n")

        container = create_locator(LocatorSettings(extra_paths=["out/a.elf"], conventions_file=catalog))

        conventions = container.locator.conventions
        assert [c.name for c in conventions] == ["vexide", "VEXCode", "custom", "pros"]
        assert isinstance(conventions[-1], SimpleFilesystemConvention)

    def test_no_conventions_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="No filesystem conventions"):
            create_locator(LocatorSettings(enable_vexide=False, enable_vexcode=False))

    def test_malformed_catalog_raises(self, tmp_path: Path) -> None:
        catalog = tmp_path / "conventions.yaml"
        catalog.write_text("- not a mapping\n")
        with pytest.raises(ConfigurationError):
            create_locator(LocatorSettings(conventions_file=catalog))

    def test_loads_settings_when_none_given(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARTIFACT_LOCATOR_ENABLE_VEXIDE", "false")
        container = create_locator()
        assert container.locator.name == "Recent Files (VEXCode)"
