"""Composite status lookup for combining several status sources."""

from typing import List, Optional, Sequence

from dirins.types import PathType

from .base_status import BaseStatusLookup, FileStatus


class CompositeStatusLookup(BaseStatusLookup):
    """Status lookup that combines several lookups.

    A path is IGNORED if ANY constituent lookup reports it IGNORED. Otherwise the
    status is the first one that is not UNKNOWN, in constituent order, or UNKNOWN
    when no lookup knows the path.

    Attributes:
        lookups (List[BaseStatusLookup]): Constituent lookups, in evaluation order.

    Example:
        >>> from dirins.status.base_status import NullStatusLookup
        >>> class IgnoreEverything(BaseStatusLookup):
        ...     def get_status(self, path):
        ...         return FileStatus.IGNORED
        >>> composite = CompositeStatusLookup([NullStatusLookup(), IgnoreEverything()])
        >>> composite.get_status("anything") is FileStatus.IGNORED
        True
    """

    def __init__(self, lookups: Sequence[BaseStatusLookup]):
        """Initialize the composite lookup.

        Args:
            lookups: Lookups to combine.

        Raises:
            ValueError: If no lookups are given.
            TypeError: If any member doesn't implement BaseStatusLookup.
        """
        if not lookups:
            raise ValueError("At least one status lookup must be provided")

        for i, lookup in enumerate(lookups):
            if not isinstance(lookup, BaseStatusLookup):
                raise TypeError(
                    f"Lookup at index {i} must implement BaseStatusLookup, got {type(lookup).__name__}"
                )

        self.lookups: List[BaseStatusLookup] = list(lookups)

    def get_status(self, path: Optional[PathType]) -> FileStatus:
        statuses = [lookup.get_status(path) for lookup in self.lookups]
        if FileStatus.IGNORED in statuses:
            return FileStatus.IGNORED
        return next((status for status in statuses if status is not FileStatus.UNKNOWN), FileStatus.UNKNOWN)

    def add_lookup(self, lookup: BaseStatusLookup) -> None:
        """Append another lookup.

        Raises:
            TypeError: If the lookup doesn't implement BaseStatusLookup.
        """
        if not isinstance(lookup, BaseStatusLookup):
            raise TypeError(f"Lookup must implement BaseStatusLookup, got {type(lookup).__name__}")
        self.lookups.append(lookup)
