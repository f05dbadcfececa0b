"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from svcdocs.config import ConfigLoader, DocsConfig, load_config


class TestConfigLoader:
    def test_defaults_without_file(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config == DocsConfig()
        assert config.output_dir == "docs"
        assert config.banner is True
        assert config.settings.max_workers == 1

    def test_project_file(self, tmp_path: Path):
        (tmp_path / "svcdocs.yaml").write_text(
            "output_dir: site/api\nbanner: false\nsettings:\n  max_workers: 3\n"
        )
        config = load_config(str(tmp_path))
        assert config.output_dir == "site/api"
        assert config.banner is False
        assert config.settings.max_workers == 3

    def test_user_level_fallback(self, tmp_path: Path, isolated_user_config: Path):
        isolated_user_config.mkdir(parents=True)
        (isolated_user_config / "svcdocs.yaml").write_text("output_dir: from-user\n")
        project = tmp_path / "project"
        project.mkdir()
        assert load_config(project).output_dir == "from-user"

    def test_invalid_file_falls_back_to_defaults(self, tmp_path: Path):
        (tmp_path / "svcdocs.yaml").write_text("settings:\n  max_workers: 0\n")
        assert load_config(tmp_path) == DocsConfig()

    def test_undecodable_file_falls_back_to_defaults(self, tmp_path: Path):
        (tmp_path / "svcdocs.yaml").write_bytes(b"output_dir: \xff\xfe\n")
        assert load_config(tmp_path) == DocsConfig()

    def test_project_file_shadows_user_file(self, tmp_path: Path, isolated_user_config: Path):
        isolated_user_config.mkdir(parents=True)
        (isolated_user_config / "svcdocs.yaml").write_text("output_dir: from-user\n")
        (tmp_path / "svcdocs.yaml").write_text("output_dir: from-project\n")
        loader = ConfigLoader(tmp_path)
        assert list(loader.candidates()) == [
            tmp_path / "svcdocs.yaml",
            isolated_user_config / "svcdocs.yaml",
        ]
        assert loader.find() == tmp_path / "svcdocs.yaml"
        assert loader.load().output_dir == "from-project"


class TestStarterConfig:
    def test_writes_defaults(self, tmp_path: Path):
        loader = ConfigLoader(tmp_path)
        path = loader.write_starter()
        assert path == tmp_path / "svcdocs.yaml"
        assert loader.load() == DocsConfig()
        assert "max_workers: 1" in path.read_text(encoding="utf-8")

    def test_refuses_to_overwrite(self, tmp_path: Path):
        (tmp_path / "svcdocs.yaml").write_text("output_dir: mine\n")
        with pytest.raises(FileExistsError):
            ConfigLoader(tmp_path).write_starter()
        assert load_config(tmp_path).output_dir == "mine"

    def test_force_overwrites(self, tmp_path: Path):
        (tmp_path / "svcdocs.yaml").write_text("output_dir: mine\n")
        ConfigLoader(tmp_path).write_starter(force=True)
        assert load_config(tmp_path) == DocsConfig()
