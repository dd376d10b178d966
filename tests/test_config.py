"""Tests for command configuration models."""

import json

import pytest

from music_reorganizer.exceptions import ConfigurationError
from music_reorganizer.models.config import (
    DuplicateFilterConfig,
    PruneConfig,
    ReorganizeConfig,
    load_config,
    normalize_extension,
)


class TestNormalizeExtension:

    @pytest.mark.parametrize("raw, expected", [
        ("mp3", "mp3"),
        (".mp3", "mp3"),
        (" flac ", "flac"),
        ("..bak", ".bak"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_extension(raw) == expected

    @pytest.mark.parametrize("raw", ["", ".", "  "])
    def test_empty_rejected(self, raw):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            normalize_extension(raw)


class TestReorganizeConfig:

    def test_validate_normalizes_extension(self, tmp_path):
        config = ReorganizeConfig(
            input_dir=tmp_path,
            dest_dir=tmp_path / "dest",
            input_file_ext=".flac",
            log_file=tmp_path / "log.txt",
        ).validate()

        assert config.input_file_ext == "flac"
        assert config.dry_run is False

    def test_input_dir_must_be_directory(self, tmp_path):
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("x")
        config = ReorganizeConfig(not_a_dir, tmp_path / "dest", "flac", tmp_path / "log.txt")

        with pytest.raises(ConfigurationError, match="input-dir is not a directory"):
            config.validate()


class TestDuplicateFilterConfig:

    def test_both_directories_checked(self, tmp_path):
        config = DuplicateFilterConfig(
            dir_1=tmp_path,
            file_ext_1="mp3",
            dir_2=tmp_path / "missing",
            file_ext_2="flac",
            duplicate_dir=tmp_path / "dups",
            log_file=tmp_path / "log.txt",
        )

        with pytest.raises(ConfigurationError, match="dir-2 does not exist"):
            config.validate()


class TestPruneConfig:

    def test_extension_kept_verbatim(self, tmp_path):
        config = PruneConfig(dir=tmp_path, file_ext=".mp3", log_file=tmp_path / "log.txt").validate()

        assert config.file_ext == ".mp3"

    def test_empty_extension(self, tmp_path):
        with pytest.raises(ConfigurationError):
            PruneConfig(dir=tmp_path, file_ext="", log_file=tmp_path / "log.txt").validate()


class TestLoadConfig:

    def test_load(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "reorganize": {"dest_dir": "/music/sorted", "input_file_ext": "flac"},
            "prune-dirs": {"file_ext": "flac"},
        }))

        defaults = load_config(config_file)

        assert defaults["reorganize"]["input_file_ext"] == "flac"
        assert defaults["prune-dirs"] == {"file_ext": "flac"}

    def test_malformed_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_config(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.json")

    @pytest.mark.parametrize("data", [[1, 2], {"reorganize": "flac"}])
    def test_wrong_shape(self, tmp_path, data):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps(data))

        with pytest.raises(ConfigurationError, match="must map command names"):
            load_config(config_file)
