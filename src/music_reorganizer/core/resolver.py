"""Disambiguate titles that exist at more than one sample rate."""

import logging
from typing import Iterator

from ..exceptions import TagWriteError
from ..models.report import OperationRecord, OperationStatus, OperationType, RunReport
from ..models.track import IdentityKey, SampleRateGroups, Track
from .metadata import MetadataAccessor


def colliding_keys(groups: SampleRateGroups) -> Iterator[IdentityKey]:
    """Yield every identity with more than one sample-rate bucket."""
    for key, by_rate in groups.items():
        if len(by_rate) > 1:
            yield key


def rate_tagged_album(album: str, sample_rate: int) -> str:
    return f"{album} [{sample_rate}]"


def resolve_collisions(
    groups: SampleRateGroups,
    accessor: MetadataAccessor,
    action_log: logging.Logger,
    report: RunReport,
    dry_run: bool = False,
) -> int:
    """Append ``[<sample rate>]`` to the album tag of every colliding track.

    Every track under a colliding identity is retagged, whatever the size of
    its bucket. In dry-run the rewrite is only logged; neither the file nor
    the in-memory track changes. Returns the number of retag attempts.
    """
    attempts = 0
    for key in colliding_keys(groups):
        for sample_rate, tracks in groups[key].items():
            for track in tracks:
                attempts += 1
                _retag(track, key, sample_rate, accessor, action_log, report, dry_run)
    return attempts


def _retag(
    track: Track,
    key: IdentityKey,
    sample_rate: int,
    accessor: MetadataAccessor,
    action_log: logging.Logger,
    report: RunReport,
    dry_run: bool,
) -> None:
    album = rate_tagged_album(track.album or "", sample_rate)
    action_log.info(f"Retagging duplicate title {key}: {album}")

    if dry_run:
        report.record(OperationRecord(OperationType.RETAG, track.path, None, OperationStatus.PLANNED))
        return

    try:
        accessor.write_album(track.path, album)
    except TagWriteError as e:
        action_log.error(f"retag failed {track.path}: {e}")
        report.record(OperationRecord(
            OperationType.RETAG, track.path, None, OperationStatus.FAILED, str(e)
        ))
        return

    track.album = album
    report.record(OperationRecord(OperationType.RETAG, track.path, None, OperationStatus.COMPLETED))
