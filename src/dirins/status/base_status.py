from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence, Union

from dirins.types import PathType


class FileStatus(str, Enum):
    """Status of a path as tracked by a status lookup.

    Values:
        NOT_CHANGED: The path is tracked and not ignored.
        IGNORED: The path matches ignore rules and is left out of listings.
        UNKNOWN: The lookup has no information about the path (e.g. it lies outside the project).
    """

    NOT_CHANGED = "not_changed"
    IGNORED = "ignored"
    UNKNOWN = "unknown"


class BaseStatusLookup(ABC):
    """
    Abstract base class defining the interface for path status lookups.

    A status lookup answers, for a file-system path, what status the project's
    tracking mechanism assigns to it. The tree renderer only cares whether a
    directory is IGNORED; concrete lookups decide how ignore rules are sourced.
    Loading rules from files and adding individual rules are optional capabilities.

    Example:
        >>> class NothingIgnored(BaseStatusLookup):
        ...     def get_status(self, path):
        ...         return FileStatus.NOT_CHANGED
        >>> NothingIgnored().is_ignored("build")
        False
    """

    @abstractmethod
    def get_status(self, path: Optional[PathType]) -> FileStatus:
        """
        Determine the status of a path.

        Args:
            path: The file-system path to look up. Lookups must accept None and
                report UNKNOWN for it, since snapshot nodes may carry no path.

        Returns:
            FileStatus: The status assigned to the path.
        """
        pass

    def is_ignored(self, path: Optional[PathType]) -> bool:
        """Shorthand for ``get_status(path) is FileStatus.IGNORED``."""
        return self.get_status(path) is FileStatus.IGNORED

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load ignore rules from one or more files.

        Raises:
            NotImplementedError: If this lookup doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting lookups).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single ignore rule directly.

        Raises:
            NotImplementedError: If this lookup doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")


class NullStatusLookup(BaseStatusLookup):
    """Status lookup that reports every path as NOT_CHANGED."""

    def get_status(self, path: Optional[PathType]) -> FileStatus:
        return FileStatus.NOT_CHANGED
