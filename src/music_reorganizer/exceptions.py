"""Custom exceptions for music reorganizer."""


class MusicReorganizerError(Exception):
    """Base exception for music reorganizer errors."""
    pass


class ConfigurationError(MusicReorganizerError):
    """Raised when a command is misconfigured (missing root, bad option)."""
    pass


class MetadataError(MusicReorganizerError):
    """Raised when there's an error reading or writing audio metadata."""
    pass


class UnreadableFileError(MetadataError):
    """Raised when a file cannot be opened as an audio container."""
    pass


class MissingTagError(MetadataError):
    """Raised when an audio container opens but carries no tag block."""
    pass


class TagWriteError(MetadataError):
    """Raised when a tag rewrite cannot be saved back to the file."""
    pass


class FileOperationError(MusicReorganizerError):
    """Raised when file operations fail."""
    pass
