"""Delete unwanted files, then remove the directories left empty."""

import logging
import os
from pathlib import Path
from typing import Iterator, Set

from ..models.config import PruneConfig
from ..models.report import RunReport
from .mover import FileMover

logger = logging.getLogger(__name__)


def _directories_bottom_up(root: Path) -> Iterator[Path]:
    """Yield ``root`` and every directory beneath it, deepest first."""
    for dirpath, _, _ in os.walk(root, topdown=False):
        yield Path(dirpath)


def prune_directories(config: PruneConfig, action_log: logging.Logger) -> RunReport:
    """Prune ``config.dir`` in two strictly sequential passes.

    1. Delete every regular file whose name does not contain ``file_ext``
       (substring match, so ``mp3`` keeps ``song.mp3.bak``).
    2. Walk the tree again and remove every directory beneath the root whose
       entries have all been removed.

    Removals are tracked in a set so a parent emptied by removing its children
    is removed too, and so a dry-run logs exactly what a real run would.
    """
    config.validate()
    report = RunReport()
    mover = FileMover(action_log, report, dry_run=config.dry_run)
    removed: Set[Path] = set()

    for directory in _directories_bottom_up(config.dir):
        for entry in sorted(directory.iterdir()):
            if config.file_ext in entry.name:
                continue
            if not entry.is_file():
                continue
            report.processed += 1
            if mover.delete_file(entry):
                removed.add(entry)

    for directory in _directories_bottom_up(config.dir):
        if directory == config.dir:
            continue
        if all(entry in removed for entry in directory.iterdir()):
            if mover.remove_directory(directory):
                removed.add(directory)

    logger.info(f"Pruned {report.deleted} files and {report.removed_dirs} directories")
    return report
