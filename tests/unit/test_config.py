"""Unit tests for configuration and constants."""

from __future__ import annotations

from pathlib import Path
import re

import pytest

from streaming_xml.config import ConfigLoader, WriterConfig
from streaming_xml.constants import Defaults, Patterns, SourceFormats, XMLFormat
from streaming_xml.domain.entities.record import ArrayEncodingPolicy


class TestWriterConfig:
    """Test suite for WriterConfig class."""

    def test_default_config(self):
        config = WriterConfig()

        assert config.root_element_name == "data"
        assert config.element_name == "item"
        assert config.array_policy is ArrayEncodingPolicy.REPEAT
        assert config.batch_size == 1000
        assert config.csv_chunk_size == 1000
        assert config.progress_interval == 10000

    def test_config_is_immutable(self):
        config = WriterConfig()
        with pytest.raises(AttributeError):
            config.batch_size = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("field_name", "value", "message"),
        [
            ("batch_size", 0, "batch_size must be positive"),
            ("csv_chunk_size", -1, "csv_chunk_size must be positive"),
            ("progress_interval", 0, "progress_interval must be positive"),
            ("root_element_name", "", "root_element_name must be a non-empty"),
            ("element_name", "", "element_name must be a non-empty"),
        ],
    )
    def test_validation(self, field_name: str, value: object, message: str):
        with pytest.raises(ValueError, match=message):
            WriterConfig(**{field_name: value})

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        # Arrange
        monkeypatch.setenv("XML_ROOT_ELEMENT", "users")
        monkeypatch.setenv("XML_RECORD_ELEMENT", "user")
        monkeypatch.setenv("XML_ARRAY_POLICY", "indexed")
        monkeypatch.setenv("XML_BATCH_SIZE", "50")
        monkeypatch.setenv("CSV_CHUNK_SIZE", "200")
        monkeypatch.setenv("PROGRESS_INTERVAL", "5")

        # Act
        config = WriterConfig.from_env()

        # Assert
        assert config.root_element_name == "users"
        assert config.element_name == "user"
        assert config.array_policy is ArrayEncodingPolicy.INDEXED_CHILD
        assert config.batch_size == 50
        assert config.csv_chunk_size == 200
        assert config.progress_interval == 5

    def test_from_env_defaults(self):
        assert WriterConfig.from_env() == WriterConfig()


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_load_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert ConfigLoader.load() == WriterConfig()

    def test_load_from_toml(self, tmp_path: Path):
        # Arrange
        config_file = tmp_path / "streaming_xml.toml"
        config_file.write_text(
            "[output]\n"
            'root_element = "users"\n'
            'record_element = "user"\n'
            'array_policy = "indexed"\n'
            "[batching]\n"
            "batch_size = 10\n"
            'progress_interval = "100"\n'
            "[input]\n"
            "csv_chunk_size = 64\n",
            encoding="utf-8",
        )

        # Act
        config = ConfigLoader.load(config_file)

        # Assert
        assert config.root_element_name == "users"
        assert config.element_name == "user"
        assert config.array_policy is ArrayEncodingPolicy.INDEXED_CHILD
        assert config.batch_size == 10
        assert config.progress_interval == 100
        assert config.csv_chunk_size == 64

    def test_toml_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        # Arrange
        monkeypatch.setenv("XML_ROOT_ELEMENT", "from_env")
        monkeypatch.setenv("XML_BATCH_SIZE", "7")
        config_file = tmp_path / "config.toml"
        config_file.write_text('[output]\nroot_element = "from_toml"\n', encoding="utf-8")

        # Act
        config = ConfigLoader.load(config_file)

        # Assert
        assert config.root_element_name == "from_toml"
        assert config.batch_size == 7

    def test_default_file_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        # Arrange
        (tmp_path / Defaults.CONFIG_FILE).write_text(
            "[batching]\nbatch_size = 3\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        # Act
        config = ConfigLoader.load()

        # Assert
        assert config.batch_size == 3

    def test_invalid_toml_warns_and_keeps_defaults(self, tmp_path: Path):
        # Arrange
        config_file = tmp_path / "broken.toml"
        config_file.write_text("[batching\nbatch_size = ", encoding="utf-8")

        # Act
        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file)

        # Assert
        assert config == WriterConfig()

    def test_invalid_value_warns(self, tmp_path: Path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[batching]\nbatch_size = true\n", encoding="utf-8")
        with pytest.warns(UserWarning):
            config = ConfigLoader.load(config_file)
        assert config.batch_size == Defaults.BATCH_SIZE


class TestConstants:
    """Sanity checks on shared constants."""

    def test_declaration(self):
        assert XMLFormat.DECLARATION == '<?xml version="1.0" encoding="UTF-8"?>'

    def test_default_names_are_valid_elements(self):
        assert re.match(Patterns.ELEMENT_NAME, Defaults.ROOT_ELEMENT)
        assert re.match(Patterns.ELEMENT_NAME, Defaults.RECORD_ELEMENT)

    def test_suffixes_map_to_supported_formats(self):
        assert set(SourceFormats.SUFFIXES.values()) <= set(SourceFormats.SUPPORTED)

    def test_default_policy_is_known(self):
        assert ArrayEncodingPolicy.from_name(Defaults.ARRAY_POLICY) is (
            ArrayEncodingPolicy.REPEAT
        )
