"""Shared fixtures for music reorganizer tests."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from music_reorganizer.core.action_log import open_action_log
from music_reorganizer.core.metadata import MetadataAccessor
from music_reorganizer.exceptions import MissingTagError, TagWriteError, UnreadableFileError
from music_reorganizer.models.track import TagInfo


class FakeTagAccessor(MetadataAccessor):
    """In-memory MetadataAccessor keyed by file path."""

    def __init__(
        self,
        tags: Optional[Dict[Path, TagInfo]] = None,
        unreadable: Iterable[Path] = (),
        untagged: Iterable[Path] = (),
        failing_writes: Iterable[Path] = (),
    ):
        self.tags = dict(tags or {})
        self.unreadable = set(unreadable)
        self.untagged = set(untagged)
        self.failing_writes = set(failing_writes)
        self.reads: List[Path] = []
        self.writes: List[tuple] = []

    def read_tag(self, file_path: Path) -> TagInfo:
        self.reads.append(file_path)
        if file_path in self.unreadable:
            raise UnreadableFileError(f"Cannot open {file_path}")
        if file_path in self.untagged:
            raise MissingTagError(f"No tag block: {file_path}")
        return self.tags[file_path]

    def write_album(self, file_path: Path, album: str) -> None:
        if file_path in self.failing_writes:
            raise TagWriteError(f"Failed to write album tag to {file_path}")
        self.writes.append((file_path, album))
        tag = self.tags[file_path]
        self.tags[file_path] = TagInfo(artist=tag.artist, album=album, sample_rate=tag.sample_rate)


def write_file(path: Path, data: bytes = b"fake audio data") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def read_actions(log_file: Path) -> List[str]:
    """Action log messages with the timestamp and level stripped."""
    lines = log_file.read_text(encoding="utf-8").splitlines()
    return [line.split(" ", 3)[3] for line in lines if line]


def snapshot(root: Path) -> Dict[str, bytes]:
    """Every file and directory under ``root`` with its contents."""
    result = {}
    for path in sorted(root.rglob("*")):
        key = str(path.relative_to(root))
        result[key] = path.read_bytes() if path.is_file() else b"<dir>"
    return result


@pytest.fixture
def action_log(tmp_path):
    """A per-test action logger writing to tmp_path/actions.log."""
    with open_action_log(tmp_path / "actions.log") as logger:
        yield logger


@pytest.fixture
def action_log_file(tmp_path, action_log):
    return tmp_path / "actions.log"
