"""Tests for the configuration module."""

from pathlib import Path

import pytest

from structures._config import ConfigError, StructuresConfig, find_pyproject_toml, get_config, load_config


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading the [tool.structures] table."""

    def test_defaults_without_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == StructuresConfig()
        assert config.cache_capacity == 128
        assert config.check_weights is True

    def test_reads_values(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.structures]
cache_capacity = 16
check_weights = false
""",
        )

        config = load_config(pyproject)

        assert config.cache_capacity == 16
        assert config.check_weights is False

    def test_negative_capacity_raises(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.structures]\ncache_capacity = -1\n")

        with pytest.raises(ConfigError, match="cache_capacity"):
            load_config(pyproject)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.structures]\ncapacity = 4\n")

        with pytest.raises(ConfigError, match="capacity"):
            load_config(pyproject)

    def test_non_table_section_raises(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool]\nstructures = 3\n")

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.structures\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_config_is_frozen(self) -> None:
        config = StructuresConfig()
        with pytest.raises(ValueError):
            config.cache_capacity = 5  # type: ignore[misc]


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.structures]\ncache_capacity = 7\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().cache_capacity == 7
