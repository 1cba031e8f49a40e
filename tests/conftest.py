"""Shared fixtures for cmdsmith tests."""

from pathlib import Path

import pytest

from cmdsmith.models import CmdsmithConfig
from cmdsmith.paths import StorageLocation


@pytest.fixture
def location(tmp_path: Path) -> StorageLocation:
    """A storage location inside a per-test temporary directory."""
    return StorageLocation(tmp_path / ".cmdsmith")


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> StorageLocation:
    """Point the default storage location at a temporary directory."""
    root = tmp_path / "config-home"
    monkeypatch.setenv("CMDSMITH_CONFIG_DIR", str(root))
    return StorageLocation(root)


@pytest.fixture
def config() -> CmdsmithConfig:
    return CmdsmithConfig(api_key="sk-test-1234", model="gpt-test")
