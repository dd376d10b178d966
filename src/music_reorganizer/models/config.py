"""Configuration models for the reorganizer commands."""

from pathlib import Path
from typing import Dict, Any
import json
from dataclasses import dataclass

from ..exceptions import ConfigurationError


def normalize_extension(extension: str) -> str:
    """Strip one leading dot so ``.mp3`` and ``mp3`` mean the same thing."""
    extension = extension.strip()
    if extension.startswith("."):
        extension = extension[1:]
    if not extension:
        raise ConfigurationError("File extension must not be empty")
    return extension


def _require_directory(path: Path, option: str) -> None:
    if not path.exists():
        raise ConfigurationError(f"{option} does not exist: {path}")
    if not path.is_dir():
        raise ConfigurationError(f"{option} is not a directory: {path}")


@dataclass
class ReorganizeConfig:
    """Options for the ``reorganize`` command."""
    input_dir: Path
    dest_dir: Path
    input_file_ext: str
    log_file: Path
    dry_run: bool = False

    def validate(self) -> "ReorganizeConfig":
        _require_directory(self.input_dir, "input-dir")
        self.input_file_ext = normalize_extension(self.input_file_ext)
        return self


@dataclass
class DuplicateFilterConfig:
    """Options for the ``filter-duplicates`` command."""
    dir_1: Path
    file_ext_1: str
    dir_2: Path
    file_ext_2: str
    duplicate_dir: Path
    log_file: Path
    dry_run: bool = False

    def validate(self) -> "DuplicateFilterConfig":
        _require_directory(self.dir_1, "dir-1")
        _require_directory(self.dir_2, "dir-2")
        self.file_ext_1 = normalize_extension(self.file_ext_1)
        self.file_ext_2 = normalize_extension(self.file_ext_2)
        return self


@dataclass
class PruneConfig:
    """Options for the ``prune-dirs`` command.

    ``file_ext`` is kept verbatim: it is matched as a substring of file names.
    """
    dir: Path
    file_ext: str
    log_file: Path
    dry_run: bool = False

    def validate(self) -> "PruneConfig":
        _require_directory(self.dir, "dir")
        if not self.file_ext:
            raise ConfigurationError("File extension must not be empty")
        return self


def load_config(config_path: Path) -> Dict[str, Dict[str, Any]]:
    """Load per-command option defaults from a JSON file.

    The file maps command names to option values, e.g.
    ``{"reorganize": {"dest_dir": "/music/sorted", "input_file_ext": "flac"}}``.
    """
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}")

    if not isinstance(config_data, dict) or not all(
        isinstance(value, dict) for value in config_data.values()
    ):
        raise ConfigurationError(
            f"Config file {config_path} must map command names to option objects"
        )

    return config_data

