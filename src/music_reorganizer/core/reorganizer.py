"""The ``reorganize`` pipeline: scan, disambiguate, plan, move."""

import logging
from typing import Optional

from ..models.config import ReorganizeConfig
from ..models.report import RunReport
from .metadata import MetadataAccessor
from .mover import FileMover
from .paths import ExceptionBucket, destination_dir, exception_dir
from .resolver import resolve_collisions
from .scanner import ProgressCallback, scan_tracks

logger = logging.getLogger(__name__)


def reorganize(
    config: ReorganizeConfig,
    accessor: MetadataAccessor,
    action_log: logging.Logger,
    progress_callback: Optional[ProgressCallback] = None,
) -> RunReport:
    """Reorganize ``config.input_dir`` into ``config.dest_dir``.

    Grouped tracks go to ``<dest>/<sample rate>/<artist dir>/<album dir>``,
    unreadable and untagged files to ``<dest>/exceptions/{bad_files,bad_tags}``.
    Titles present at several sample rates are retagged first. All state is
    rebuilt from disk on every call.
    """
    config.validate()
    report = RunReport()
    mover = FileMover(action_log, report, dry_run=config.dry_run)

    scan = scan_tracks(config.input_dir, config.input_file_ext, accessor, progress_callback)
    report.processed = scan.processed
    report.bad_tags = len(scan.bad_tags)
    report.bad_files = len(scan.bad_files)

    resolve_collisions(scan.groups, accessor, action_log, report, dry_run=config.dry_run)

    for track in scan.tracks:
        mover.move_file(track.path, destination_dir(track.path, track.sample_rate, config.dest_dir))

    bad_files_dir = exception_dir(config.dest_dir, ExceptionBucket.BAD_FILES)
    for file_path in scan.bad_files:
        mover.move_file(file_path, bad_files_dir)

    bad_tags_dir = exception_dir(config.dest_dir, ExceptionBucket.BAD_TAGS)
    for file_path in scan.bad_tags:
        mover.move_file(file_path, bad_tags_dir)

    logger.info(
        f"Reorganized {report.processed} files: {report.moved} moved, "
        f"{report.retagged} retagged, {len(report.errors)} errors"
    )
    return report
