"""Music Reorganizer

Reorganize audio files into sample-rate/artist/album trees, filter
cross-format duplicates and prune emptied directories.
"""

__version__ = "0.1.0"
