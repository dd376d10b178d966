"""Find candidate files and group them by identity and sample rate."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..exceptions import ConfigurationError, MissingTagError, UnreadableFileError
from ..models.track import ScanResult, Track
from .metadata import MetadataAccessor

logger = logging.getLogger(__name__)

# (current, total, bad_tags, bad_files)
ProgressCallback = Callable[[int, int, int, int], None]


def iter_audio_files(root: Path, extension: str) -> Iterator[Path]:
    """Lazily yield regular files under ``root`` named ``*.<extension>``.

    The extension is compared literally against the end of the file name,
    so characters like ``[`` or ``*`` have no special meaning. Directories
    and names are visited in sorted order. Like a ``**/*.ext`` glob, hidden
    names (leading ``.``) are neither matched nor descended into.
    """
    suffix = f".{extension}"
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        base = Path(dirpath)
        for name in sorted(filenames):
            if name.startswith(".") or not name.endswith(suffix):
                continue
            path = base / name
            if path.is_file():
                yield path


def scan_tracks(
    root: Path,
    extension: str,
    accessor: MetadataAccessor,
    progress_callback: Optional[ProgressCallback] = None,
) -> ScanResult:
    """Classify every candidate file under ``root``.

    Readable tagged files are grouped by (artist, album) then sample rate;
    unreadable containers and untagged files land in ``bad_files`` and
    ``bad_tags``. Missing artist or album values group under "".
    """
    if not root.exists():
        raise ConfigurationError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Path is not a directory: {root}")

    files = list(iter_audio_files(root, extension))
    total = len(files)
    logger.info(f"Found {total} *.{extension} files in {root}")

    result = ScanResult()
    for file_path in files:
        result.processed += 1
        try:
            tag = accessor.read_tag(file_path)
        except UnreadableFileError as e:
            logger.debug(f"Unreadable: {e}")
            result.bad_files.append(file_path)
        except MissingTagError as e:
            logger.debug(f"Untagged: {e}")
            result.bad_tags.append(file_path)
        else:
            result.add(Track.from_tag(file_path, tag))

        if progress_callback:
            progress_callback(result.processed, total, len(result.bad_tags), len(result.bad_files))

    return result
