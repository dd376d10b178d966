"""Metadata access for audio files.

The reorganizer only needs three things from a file: its artist and album
tags and the stream sample rate, plus the ability to rewrite the album tag.
``MetadataAccessor`` is that capability; ``MutagenTagAccessor`` implements it
on top of mutagen's "easy" interface so the same ``artist``/``album`` keys
work for ID3, Vorbis comments, MP4 atoms and the other formats mutagen knows.
WAV and AIFF have no easy wrapper; their tags stay raw ID3 frames and are
read and written through ``TPE1``/``TALB`` directly.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from mutagen import File as MutagenFile
from mutagen.id3 import ID3, TALB

from ..exceptions import MissingTagError, TagWriteError, UnreadableFileError
from ..models.track import TagInfo


class MetadataAccessor(ABC):
    """Read tags and audio properties, and rewrite the album tag."""

    @abstractmethod
    def read_tag(self, file_path: Path) -> TagInfo:
        """Read artist, album and sample rate.

        Raises:
            UnreadableFileError: the file is not a readable audio container.
            MissingTagError: the container opened but has no tag block.
        """
        ...

    @abstractmethod
    def write_album(self, file_path: Path, album: str) -> None:
        """Persist a new album value.

        Raises:
            TagWriteError: the file could not be opened or saved.
        """
        ...


class MutagenTagAccessor(MetadataAccessor):
    """MetadataAccessor backed by mutagen.

    mutagen opens and closes the underlying file inside each load/save call,
    so no handle outlives a single read or write.
    """

    def read_tag(self, file_path: Path) -> TagInfo:
        try:
            audio = MutagenFile(file_path, easy=True)
        except Exception as e:
            raise UnreadableFileError(f"Cannot open {file_path}: {e}") from e

        if audio is None:
            raise UnreadableFileError(f"Unsupported file format: {file_path}")

        sample_rate = getattr(getattr(audio, 'info', None), 'sample_rate', None)
        if not isinstance(sample_rate, int) or sample_rate <= 0:
            raise UnreadableFileError(f"No sample rate in stream info: {file_path}")

        tags = audio.tags
        if tags is None:
            raise MissingTagError(f"No tag block: {file_path}")

        if isinstance(tags, ID3):
            # WAV/AIFF
            return TagInfo(
                artist=self._id3_text(tags, 'TPE1'),
                album=self._id3_text(tags, 'TALB'),
                sample_rate=sample_rate,
            )

        return TagInfo(
            artist=self._first_value(tags, 'artist'),
            album=self._first_value(tags, 'album'),
            sample_rate=sample_rate,
        )

    def write_album(self, file_path: Path, album: str) -> None:
        try:
            audio = MutagenFile(file_path, easy=True)
            if audio is None:
                raise TagWriteError(f"Unsupported file format: {file_path}")
            if audio.tags is None:
                audio.add_tags()
            if isinstance(audio.tags, ID3):
                audio.tags.setall('TALB', [TALB(encoding=3, text=[album])])
            else:
                audio['album'] = [album]
            audio.save()
        except TagWriteError:
            raise
        except Exception as e:
            raise TagWriteError(f"Failed to write album tag to {file_path}: {e}") from e

    @staticmethod
    def _first_value(tags: Any, key: str) -> Optional[str]:
        """Get a single-value field from easy tags."""
        try:
            value = tags.get(key)
        except (KeyError, ValueError):
            return None
        if isinstance(value, list):
            return str(value[0]) if value else None
        return str(value) if value else None

    @staticmethod
    def _id3_text(tags: ID3, frame_id: str) -> Optional[str]:
        """Get the first text value of a raw ID3 frame."""
        frame = tags.get(frame_id)
        if frame is None or not frame.text:
            return None
        return str(frame.text[0])
