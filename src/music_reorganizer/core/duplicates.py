"""Move files that already exist, by name, in another format elsewhere."""

import logging
from collections import Counter
from pathlib import Path

from ..models.config import DuplicateFilterConfig
from ..models.report import RunReport
from .mover import FileMover
from .paths import duplicate_dir
from .scanner import iter_audio_files

logger = logging.getLogger(__name__)


def counterpart_name(file_path: Path, ext_1: str, ext_2: str) -> str:
    """Name ``file_path`` would have with ``ext_2`` instead of ``ext_1``."""
    name = file_path.name
    suffix = f".{ext_1}"
    if name.endswith(suffix):
        name = name[:-len(suffix)]
    return f"{name}.{ext_2}"


def filter_duplicates(config: DuplicateFilterConfig, action_log: logging.Logger) -> RunReport:
    """Move every set-1 file whose counterpart name appears anywhere in set 2.

    Only file names are compared; directories and tags play no part. A file
    that is itself a member of set 2 is never moved.
    """
    config.validate()
    report = RunReport()
    mover = FileMover(action_log, report, dry_run=config.dry_run)

    files_2 = list(iter_audio_files(config.dir_2, config.file_ext_2))
    names_2 = Counter(path.name for path in files_2)
    members_2 = {path.resolve() for path in files_2}

    for file_1 in iter_audio_files(config.dir_1, config.file_ext_1):
        report.processed += 1
        if file_1.resolve() in members_2:
            continue

        wanted = counterpart_name(file_1, config.file_ext_1, config.file_ext_2)
        if names_2[wanted] > 0:
            mover.move_file(file_1, duplicate_dir(file_1, config.duplicate_dir))

    logger.info(f"Checked {report.processed} files, {report.moved} duplicates")
    return report
