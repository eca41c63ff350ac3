"""Status lookups that decide which paths are ignored."""

from .base_status import BaseStatusLookup, FileStatus, NullStatusLookup
from .composite_status import CompositeStatusLookup
from .gitignore_status import GitIgnoreStatusLookup

__all__ = [
    "BaseStatusLookup",
    "CompositeStatusLookup",
    "FileStatus",
    "GitIgnoreStatusLookup",
    "NullStatusLookup",
]
