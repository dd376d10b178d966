"""Core pipelines for music reorganizer."""

from .duplicates import filter_duplicates
from .metadata import MetadataAccessor, MutagenTagAccessor
from .pruner import prune_directories
from .reorganizer import reorganize

__all__ = [
    "MetadataAccessor",
    "MutagenTagAccessor",
    "reorganize",
    "filter_duplicates",
    "prune_directories",
]
