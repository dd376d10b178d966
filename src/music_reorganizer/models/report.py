"""Run report: counters and the record of every planned or executed action."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class OperationType(Enum):
    """Type of file operation."""
    MOVE = "move"
    DELETE = "delete"
    REMOVE_DIR = "remove_dir"
    RETAG = "retag"


class OperationStatus(Enum):
    """Status of an operation."""
    PLANNED = "planned"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class OperationRecord:
    """Represents a single file operation record."""
    operation_type: OperationType
    source: Path
    target: Optional[Path]
    status: OperationStatus
    error_message: Optional[str] = None


@dataclass
class RunReport:
    """Accumulated counters for one command invocation.

    Used for console output only; nothing in the pipelines branches on it.
    """
    processed: int = 0
    bad_tags: int = 0
    bad_files: int = 0
    retagged: int = 0
    moved: int = 0
    skipped: int = 0
    deleted: int = 0
    removed_dirs: int = 0
    operations: List[OperationRecord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def record(self, record: OperationRecord) -> None:
        self.operations.append(record)
        if record.status == OperationStatus.FAILED:
            self.errors.append(
                f"{record.operation_type.value} {record.source}: {record.error_message}"
            )
            return
        if record.status == OperationStatus.SKIPPED:
            self.skipped += 1
            return

        if record.operation_type == OperationType.MOVE:
            self.moved += 1
        elif record.operation_type == OperationType.DELETE:
            self.deleted += 1
        elif record.operation_type == OperationType.REMOVE_DIR:
            self.removed_dirs += 1
        elif record.operation_type == OperationType.RETAG:
            self.retagged += 1

    def operations_of(self, operation_type: OperationType) -> List[OperationRecord]:
        return [op for op in self.operations if op.operation_type == operation_type]

    def summary(self) -> Dict[str, int]:
        """Counters in display order."""
        return {
            "processed": self.processed,
            "bad tags": self.bad_tags,
            "unreadable files": self.bad_files,
            "retagged": self.retagged,
            "moved": self.moved,
            "skipped": self.skipped,
            "deleted": self.deleted,
            "directories removed": self.removed_dirs,
            "errors": len(self.errors),
        }
