"""Destination planning.

Artist and album path segments come from the directories a file physically
sits in (grandparent and parent), never from its tags. All functions here are
pure: nothing touches the filesystem.
"""

from enum import Enum
from pathlib import Path
from typing import Tuple


class ExceptionBucket(Enum):
    """Subtrees for files that failed classification."""
    BAD_FILES = "bad_files"
    BAD_TAGS = "bad_tags"


EXCEPTIONS_DIR = "exceptions"


def source_segments(file_path: Path) -> Tuple[str, str]:
    """Return (artist_dir, album_dir) basenames for ``file_path``.

    A file at the filesystem root, or a bare relative name, has no usable
    parent or grandparent; those segments are "".
    """
    album_dir = file_path.parent
    artist_dir = album_dir.parent
    return _segment(artist_dir), _segment(album_dir)


def _segment(directory: Path) -> str:
    # Path("/").name is ""; ".." must never climb out of a destination root
    name = directory.name
    return "" if name in ("", ".", "..") else name


def _join(root: Path, *segments: str) -> Path:
    result = root
    for segment in segments:
        if segment:
            result = result / segment
    return result


def destination_dir(file_path: Path, sample_rate: int, dest_root: Path) -> Path:
    """``dest_root/<sample_rate>/<artist_dir>/<album_dir>``, empty segments dropped."""
    artist_dir, album_dir = source_segments(file_path)
    return _join(dest_root, str(sample_rate), artist_dir, album_dir)


def exception_dir(dest_root: Path, bucket: ExceptionBucket) -> Path:
    return dest_root / EXCEPTIONS_DIR / bucket.value


def duplicate_dir(file_path: Path, duplicate_root: Path) -> Path:
    """``duplicate_root/<artist_dir>/<album_dir>``, empty segments dropped."""
    artist_dir, album_dir = source_segments(file_path)
    return _join(duplicate_root, artist_dir, album_dir)
