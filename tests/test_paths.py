"""Unit tests for cmdsmith.paths."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from cmdsmith.paths import StorageLocation, default_location, user_config_dir, write_private_file


class TestStorageLocation:
    def test_file_names(self, tmp_path):
        location = StorageLocation(tmp_path)
        assert location.config_file == tmp_path / "config.json"
        assert location.history_file == tmp_path / "history.json"


class TestDefaultLocation:
    def test_env_override_is_used_verbatim(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CMDSMITH_CONFIG_DIR", str(tmp_path / "custom"))
        assert default_location().root == tmp_path / "custom"

    @patch("cmdsmith.paths.sys.platform", "linux")
    def test_linux_uses_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("CMDSMITH_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_location().root == tmp_path / ".cmdsmith"

    def test_recomputed_on_every_call(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CMDSMITH_CONFIG_DIR", str(tmp_path / "a"))
        first = default_location()
        monkeypatch.setenv("CMDSMITH_CONFIG_DIR", str(tmp_path / "b"))
        assert default_location() != first


class TestUserConfigDir:
    @patch("cmdsmith.paths.sys.platform", "linux")
    def test_relative_xdg_is_ignored(self, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
        assert user_config_dir() == Path.home() / ".config"

    @patch("cmdsmith.paths.sys.platform", "darwin")
    def test_macos(self):
        assert user_config_dir() == Path.home() / "Library" / "Application Support"

    @patch("cmdsmith.paths.sys.platform", "win32")
    def test_windows_prefers_appdata(self, monkeypatch, tmp_path):
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert user_config_dir() == tmp_path


class TestWritePrivateFile:
    def test_creates_parent_and_writes(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "file.json"
        write_private_file(target, "{}")
        assert target.read_text() == "{}"

    def test_overwrites_existing_content(self, tmp_path):
        target = tmp_path / "file.json"
        target.write_text("old content that is longer")
        write_private_file(target, "new")
        assert target.read_text() == "new"

    def test_leaves_no_temp_files(self, tmp_path):
        target = tmp_path / "file.json"
        write_private_file(target, "x")
        assert [p.name for p in tmp_path.iterdir()] == ["file.json"]

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
    def test_file_is_owner_only(self, tmp_path):
        target = tmp_path / "file.json"
        write_private_file(target, "secret")
        assert stat.S_IMODE(target.stat().st_mode) == 0o600
