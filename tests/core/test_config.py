"""Tests for the configuration loader."""

from pathlib import Path

import pytest

from towersim.core.config import ConfigError, ConfigLoader

CONFIG_DIR = Path(__file__).parents[2] / "config"


class TestConfigLoading:
    """Test loading configuration files."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test values are read from a YAML file."""
        path = tmp_path / "sim.yaml"
        path.write_text("simulation:\n  ticks: 12\n", encoding="utf-8")

        config = ConfigLoader.load(path)

        assert config.get("simulation.ticks") == 12

    def test_load_shipped_config(self) -> None:
        """Test the bundled simulation settings load."""
        config = ConfigLoader.load(CONFIG_DIR / "simulation.yaml")
        assert config.get("simulation.ticks") == 24

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file is reported."""
        with pytest.raises(ConfigError, match="Configuration file not found"):
            ConfigLoader.load(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML is reported."""
        path = tmp_path / "bad.yaml"
        path.write_text("simulation: {ticks: 3", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load configuration"):
            ConfigLoader.load(path)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        """Test a list at the root is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be a mapping"):
            ConfigLoader.load(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file gives an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader.load(path).to_dict() == {}


class TestConfigAccess:
    """Test reading and writing values."""

    def test_get_default(self) -> None:
        """Test absent keys fall back to the default."""
        config = ConfigLoader({"simulation": {"ticks": 5}})
        assert config.get("simulation.paused", default=False) is False
        assert config.get("simulation.ticks.value") is None

    def test_set_creates_sections(self) -> None:
        """Test setting a nested key creates missing sections."""
        config = ConfigLoader()
        config.set("simulation.ticks", 30)
        assert config.get("simulation.ticks") == 30

    def test_get_section(self) -> None:
        """Test whole sections can be read."""
        config = ConfigLoader({"simulation": {"ticks": 5}})
        assert config.get_section("simulation") == {"ticks": 5}

    def test_get_section_missing(self) -> None:
        """Test reading an absent section fails."""
        with pytest.raises(ConfigError, match="section not found"):
            ConfigLoader().get_section("simulation")

    def test_get_section_not_dict(self) -> None:
        """Test reading a scalar as a section fails."""
        config = ConfigLoader({"simulation": {"ticks": 5}})
        with pytest.raises(ConfigError, match="not a section"):
            config.get_section("simulation.ticks")

    def test_merge(self) -> None:
        """Test merging overrides values and keeps untouched ones."""
        base = ConfigLoader({"simulation": {"ticks": 5, "name": "base"}})
        base.merge(ConfigLoader({"simulation": {"ticks": 9}, "extra": 1}))

        assert base.to_dict() == {"simulation": {"ticks": 9, "name": "base"}, "extra": 1}
