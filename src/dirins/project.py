"""Project context: path resolution, snapshots, read view and background execution.

The ProjectContext bundles the collaborators a directory listing needs from its
surroundings: resolving a requested path against the project root, building a
directory snapshot, telling which directories are ignored, guarding the snapshot
with a read view, and running work in the background.
"""

import os
import threading
import types
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Type

from dirins.status.base_status import BaseStatusLookup
from dirins.status.gitignore_status import GitIgnoreStatusLookup
from dirins.tree.binary_detector import is_binary_file
from dirins.tree.nodes import DirectoryNode
from dirins.tree.snapshot import BinaryFileCheck, build_directory_node
from dirins.types import PathType


class ProjectContext:
    """Access to a project's files rooted at a base directory.

    Attributes:
        root (Path): Absolute base directory of the project.
        status_lookup (BaseStatusLookup): Decides which paths are ignored. Defaults to a
            GitIgnoreStatusLookup anchored at ``root`` (which loads ``root/.gitignore``).
        binary_check (Callable[[PathType], bool]): Classifies files as binary when
            snapshots are built.

    Example:
        >>> with ProjectContext(".") as project:  # doctest: +SKIP
        ...     project.lookup_file("src")
        PosixPath('/home/user/project/src')
    """

    def __init__(
        self,
        root: PathType,
        status_lookup: Optional[BaseStatusLookup] = None,
        binary_check: BinaryFileCheck = is_binary_file,
    ) -> None:
        self.root = Path(os.path.abspath(root))
        self.status_lookup = status_lookup if status_lookup is not None else GitIgnoreStatusLookup(self.root)
        self.binary_check = binary_check
        self._read_lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def lookup_file(self, path: PathType) -> Optional[Path]:
        """Resolve a requested path.

        Absolute paths are used as given; relative paths are taken relative to ``root``.

        Returns:
            The absolute path, or None if nothing exists there.
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        candidate = Path(os.path.abspath(candidate))
        return candidate if candidate.exists() else None

    def find_directory(self, path: PathType) -> Optional[DirectoryNode]:
        """Build a snapshot of a resolved path.

        Returns:
            The snapshot root, or None if the path is not a directory.
        """
        if not Path(path).is_dir():
            return None
        return build_directory_node(path, self.binary_check)

    @contextmanager
    def read_snapshot(self) -> Iterator["ProjectContext"]:
        """Hold the project's read view for the duration of the block.

        The view is re-entrant and is released on every exit path, including
        exceptions and early returns from inside the block.
        """
        with self._read_lock:
            yield self

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Single-worker executor for background work, created on first use."""
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dirins")
            return self._executor

    def close(self) -> None:
        """Shut down the background executor, waiting for submitted work to finish."""
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None

    def __enter__(self) -> "ProjectContext":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
