"""Track model and the grouping structures built from it."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(slots=True, frozen=True)
class TagInfo:
    """Tag fields and audio properties read from a single file."""
    artist: Optional[str]
    album: Optional[str]
    sample_rate: int


@dataclass(slots=True, frozen=True)
class IdentityKey:
    """(artist, album) pair that identifies a title.

    Compared with exact string equality; absent values are stored as "".
    """
    artist: str
    album: str

    @classmethod
    def for_track(cls, track: "Track") -> "IdentityKey":
        return cls(track.artist or "", track.album or "")

    def __str__(self) -> str:
        return f"{self.artist}:{self.album}"


@dataclass(slots=True)
class Track:
    """An audio file on disk with the metadata it was grouped by."""

    path: Path
    artist: Optional[str]
    album: Optional[str]
    sample_rate: int

    @classmethod
    def from_tag(cls, path: Path, tag: TagInfo) -> "Track":
        return cls(path=path, artist=tag.artist, album=tag.album, sample_rate=tag.sample_rate)


# IdentityKey -> sample rate -> tracks, in scan order
SampleRateGroups = Dict[IdentityKey, Dict[int, List[Track]]]


@dataclass
class ScanResult:
    """Outcome of classifying every candidate file under a root."""
    groups: SampleRateGroups = field(default_factory=dict)
    bad_files: List[Path] = field(default_factory=list)
    bad_tags: List[Path] = field(default_factory=list)
    processed: int = 0

    def add(self, track: Track) -> None:
        """Place a track in its identity and sample-rate bucket."""
        by_rate = self.groups.setdefault(IdentityKey.for_track(track), {})
        by_rate.setdefault(track.sample_rate, []).append(track)

    @property
    def tracks(self) -> List[Track]:
        """Grouped tracks in identity, sample-rate, then scan order."""
        return [
            track
            for by_rate in self.groups.values()
            for bucket in by_rate.values()
            for track in bucket
        ]
