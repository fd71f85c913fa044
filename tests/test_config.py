"""Tests for expressgen.config and expressgen.files -- XDG paths, atomic writes, precedence."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from expressgen.config import (
    get_config_dir,
    get_data_dir,
    load_global_config,
    reset_global_config,
    resolve_config,
    save_global_config,
)
from expressgen.exceptions import ConfigError
from expressgen.files import atomic_write, write_files
from expressgen.models import DependencyVersions, GlobalConfig


def _write_json(path: Path, data: object) -> None:
    """Write *data* as JSON to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestXDGPaths:
    def test_config_dir_xdg_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("expressgen.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        result = get_config_dir()
        assert result == tmp_path / ".config" / "expressgen"
        assert result.is_dir()

    def test_config_dir_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("expressgen.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "custom"))
        assert get_config_dir() == tmp_path / "custom" / "expressgen"

    def test_data_dir_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("expressgen.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
        assert get_data_dir() == tmp_path / "data" / "expressgen"

    def test_fallback_dirs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("expressgen.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_config_dir() == tmp_path / ".expressgen"
        assert get_data_dir() == tmp_path / ".expressgen" / "logs"


# ---------------------------------------------------------------------------
# File writing
# ---------------------------------------------------------------------------


class TestAtomicWrite:
    def test_creates_file_with_content(self, tmp_path: Path) -> None:
        target = tmp_path / "test.txt"
        atomic_write(target, "hello world")
        assert target.read_text(encoding="utf-8") == "hello world"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "test.txt"
        target.write_text("old content", encoding="utf-8")
        atomic_write(target, "new content")
        assert target.read_text(encoding="utf-8") == "new content"

    def test_no_temp_files_left_on_success(self, tmp_path: Path) -> None:
        target = tmp_path / "test.txt"
        atomic_write(target, "content")
        assert list(tmp_path.iterdir()) == [target]

    def test_no_temp_files_left_on_error(self, tmp_path: Path) -> None:
        target = tmp_path / "test.txt"
        with patch("expressgen.files.os.fsync", side_effect=OSError("disk error")):
            with pytest.raises(OSError, match="disk error"):
                atomic_write(target, "will fail")
        assert list(tmp_path.iterdir()) == []

    def test_keeps_crlf(self, tmp_path: Path) -> None:
        target = tmp_path / "index.js"
        atomic_write(target, "a\r\nb\r\n")
        assert target.read_bytes() == b"a\r\nb\r\n"


class TestWriteFiles:
    def test_writes_relative_paths(self, tmp_path: Path) -> None:
        written = write_files(tmp_path, {"src/a.js": "a\n", ".env": "PORT=1\n"})
        assert written == ["src/a.js", ".env"]
        assert (tmp_path / "src" / "a.js").read_text() == "a\n"
        assert (tmp_path / ".env").read_text() == "PORT=1\n"


# ---------------------------------------------------------------------------
# Global config
# ---------------------------------------------------------------------------


class TestGlobalConfigFile:
    def test_load_returns_defaults_when_missing(self, isolated_config: Path) -> None:
        assert load_global_config() == GlobalConfig()

    def test_save_and_load_roundtrip(self, isolated_config: Path) -> None:
        original = GlobalConfig(port=3000, versions=DependencyVersions(express="^5.0.0"))
        save_global_config(original)
        assert load_global_config() == original

    def test_load_invalid_json_raises_config_error(self, isolated_config: Path) -> None:
        (get_config_dir() / "config.json").write_text("{invalid json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_load_invalid_schema_raises_config_error(self, isolated_config: Path) -> None:
        _write_json(get_config_dir() / "config.json", {"port": 70000})
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_unknown_output_format_rejected(self, isolated_config: Path) -> None:
        _write_json(get_config_dir() / "config.json", {"output": {"format": "banana"}})
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_reset(self, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(port=1234))
        assert reset_global_config() == GlobalConfig()
        assert load_global_config().port == 8080


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_defaults(self, isolated_config: Path) -> None:
        assert resolve_config().port == 8080

    def test_file_overrides_default(self, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(port=3000))
        assert resolve_config().port == 3000

    def test_env_overrides_file(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        save_global_config(GlobalConfig(port=3000))
        monkeypatch.setenv("EXPRESSGEN_PORT", "4000")
        assert resolve_config().port == 4000

    def test_cli_overrides_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPRESSGEN_PORT", "4000")
        assert resolve_config(cli_port=5000).port == 5000

    def test_invalid_env_port(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPRESSGEN_PORT", "abc")
        with pytest.raises(ConfigError, match="EXPRESSGEN_PORT"):
            resolve_config()

    def test_out_of_range_cli_port(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError, match="--port"):
            resolve_config(cli_port=0)
