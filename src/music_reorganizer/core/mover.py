"""File operations for moving, deleting and pruning."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from ..exceptions import FileOperationError
from ..models.report import OperationRecord, OperationStatus, OperationType, RunReport


class FileMover:
    """Perform file mutations behind a dry-run gate.

    Every action is written to the action log before it is attempted, in
    dry-run too. Failures are logged and recorded in the report, never raised,
    so one bad file does not stop a batch.
    """

    def __init__(self, action_log: logging.Logger, report: RunReport, dry_run: bool = False):
        self.action_log = action_log
        self.report = report
        self.dry_run = dry_run

    def move_file(self, source: Path, dest_dir: Path) -> Optional[Path]:
        """Move ``source`` into ``dest_dir`` keeping its name.

        Returns the (planned) new path, ``source`` itself when it already
        lives in ``dest_dir``, or None on failure.
        """
        self.action_log.info(f"mv {source} {dest_dir}")
        target = dest_dir / source.name

        if self._already_in(source, dest_dir):
            self._record(OperationType.MOVE, source, target, OperationStatus.SKIPPED)
            return source

        if self.dry_run:
            self._record(OperationType.MOVE, source, target, OperationStatus.PLANNED)
            return target

        try:
            self._perform_move(source, dest_dir, target)
        except FileOperationError as e:
            self._fail(OperationType.MOVE, source, target, e)
            return None

        self._record(OperationType.MOVE, source, target, OperationStatus.COMPLETED)
        return target

    def delete_file(self, path: Path) -> bool:
        """Delete a regular file. Returns False on failure."""
        self.action_log.info(f"deleting {path}")

        if self.dry_run:
            self._record(OperationType.DELETE, path, None, OperationStatus.PLANNED)
            return True

        try:
            path.unlink()
        except OSError as e:
            self._fail(OperationType.DELETE, path, None, FileOperationError(f"Failed to delete {path}: {e}"))
            return False

        self._record(OperationType.DELETE, path, None, OperationStatus.COMPLETED)
        return True

    def remove_directory(self, path: Path) -> bool:
        """Remove an empty directory. Returns False on failure."""
        self.action_log.info(f"unlinking {path}")

        if self.dry_run:
            self._record(OperationType.REMOVE_DIR, path, None, OperationStatus.PLANNED)
            return True

        try:
            path.rmdir()
        except OSError as e:
            self._fail(OperationType.REMOVE_DIR, path, None, FileOperationError(f"Failed to remove {path}: {e}"))
            return False

        self._record(OperationType.REMOVE_DIR, path, None, OperationStatus.COMPLETED)
        return True

    def _perform_move(self, source: Path, dest_dir: Path, target: Path) -> None:
        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError(f"Failed to create {dest_dir}: {e}")

        # Never overwrite: a same-named file in the destination is a per-file failure
        if target.exists():
            raise FileOperationError(f"Destination already exists: {target}")

        try:
            shutil.move(str(source), str(target))
        except OSError as e:
            raise FileOperationError(f"Failed to move {source}: {e}")

    @staticmethod
    def _already_in(source: Path, dest_dir: Path) -> bool:
        try:
            return source.parent.resolve() == dest_dir.resolve()
        except OSError:
            return False

    def _record(
        self,
        operation_type: OperationType,
        source: Path,
        target: Optional[Path],
        status: OperationStatus,
    ) -> None:
        self.report.record(OperationRecord(operation_type, source, target, status))

    def _fail(
        self,
        operation_type: OperationType,
        source: Path,
        target: Optional[Path],
        error: FileOperationError,
    ) -> None:
        self.action_log.error(str(error))
        self.report.record(OperationRecord(
            operation_type, source, target, OperationStatus.FAILED, str(error)
        ))
