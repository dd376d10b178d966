"""Data models for music reorganizer."""

from .track import Track, TagInfo, IdentityKey, ScanResult
from .report import RunReport, OperationRecord, OperationType, OperationStatus

__all__ = [
    "Track",
    "TagInfo",
    "IdentityKey",
    "ScanResult",
    "RunReport",
    "OperationRecord",
    "OperationType",
    "OperationStatus",
]
