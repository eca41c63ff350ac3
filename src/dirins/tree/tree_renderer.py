"""Indented text tree rendering of directory snapshots.

This module provides the TreeRenderer class, which walks a directory snapshot
depth-first and renders it as an indented tree: files first, then subdirectories,
each group in listing order. Binary files, UUID-named JSON cache files, the IDE
metadata directory and ignored directories are left out.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dirins.exceptions import DirectoryNotFoundError
from dirins.status.base_status import BaseStatusLookup, NullStatusLookup
from dirins.tree.cache_files import is_hash_json
from dirins.tree.nodes import DirectoryNode, FileEntry

# IDE project metadata directory, never listed
METADATA_DIRECTORY_NAME = ".idea"

INDENT = "  "
BRANCH = "├── "
LAST_BRANCH = "└── "

BinaryCheck = Callable[[FileEntry], bool]


def _entry_is_binary(entry: FileEntry) -> bool:
    return bool(entry.is_binary)


@dataclass
class RenderState:
    """Output buffer and current depth of a single render."""

    lines: List[str] = field(default_factory=list)
    depth: int = 1


class TreeRenderer:
    """Renders a directory snapshot as an indented text tree.

    The first line is the root name followed by ``/``. Every other line is indented
    by two spaces per level (direct children of the root sit at level 1), then a
    connector, then the entry name; directory names end with ``/``.

    Within a directory, files come first, then subdirectories. The connector is
    ``└── `` for the entry at the last position of its group and ``├── `` for the
    others. The position is the one in the full listing, before binary and cache
    files are skipped, so when the last file of a directory is skipped no file line
    of that directory gets ``└── ``.

    A directory is excluded when it is named ``.idea`` or the status lookup reports
    it IGNORED. Excluding the root leaves only the root line. An excluded
    subdirectory still gets its own line from its parent, but nothing below it is
    rendered.

    The renderer keeps no state between renders, so one instance can serve
    concurrent renders.

    Attributes:
        status_lookup (BaseStatusLookup): Default lookup for directory ignore status.
        binary_check (Callable[[FileEntry], bool]): Default binary classification.

    Example:
        >>> root = DirectoryNode("myDirectory")
        >>> _ = FileEntry("file1.txt", parent=root)
        >>> _ = FileEntry("file2.txt", parent=root)
        >>> sub = DirectoryNode("subDirectory", parent=root)
        >>> _ = FileEntry("file3.txt", parent=sub)
        >>> print(TreeRenderer().render(root), end="")
        myDirectory/
          ├── file1.txt
          └── file2.txt
          └── subDirectory/
            └── file3.txt
    """

    def __init__(
        self,
        status_lookup: Optional[BaseStatusLookup] = None,
        binary_check: Optional[BinaryCheck] = None,
    ) -> None:
        """Initialize a TreeRenderer.

        Args:
            status_lookup: Lookup used to find ignored directories. Defaults to a lookup
                that ignores nothing.
            binary_check: Callable deciding whether a file is binary. Defaults to the
                entry's ``is_binary`` flag.
        """
        self.status_lookup = status_lookup or NullStatusLookup()
        self.binary_check = binary_check or _entry_is_binary

    def render(
        self,
        root: Optional[DirectoryNode],
        status_lookup: Optional[BaseStatusLookup] = None,
        binary_check: Optional[BinaryCheck] = None,
        header: Optional[str] = None,
    ) -> str:
        """Render the tree for ``root``.

        Args:
            root: The directory to render.
            status_lookup: Overrides the renderer's status lookup for this render.
            binary_check: Overrides the renderer's binary classification for this render.
            header: Text for the first line instead of the root name. A ``/`` is appended.

        Returns:
            The tree text, one newline-terminated line per rendered entry.

        Raises:
            DirectoryNotFoundError: If ``root`` is None.
        """
        if root is None:
            raise DirectoryNotFoundError(header or "")

        lookup = status_lookup or self.status_lookup
        check = binary_check or self.binary_check

        state = RenderState()
        state.lines.append(f"{header or root.name}/")
        self._list_directory(state, root, lookup, check)
        return "".join(f"{line}\n" for line in state.lines)

    def is_excluded(self, directory: DirectoryNode, status_lookup: Optional[BaseStatusLookup] = None) -> bool:
        """Check whether a directory and everything below it is left out of the tree."""
        if directory.name == METADATA_DIRECTORY_NAME:
            return True
        return (status_lookup or self.status_lookup).is_ignored(directory.virtual_path)

    def _list_directory(
        self,
        state: RenderState,
        directory: DirectoryNode,
        status_lookup: BaseStatusLookup,
        binary_check: BinaryCheck,
    ) -> None:
        if self.is_excluded(directory, status_lookup):
            return

        indent = INDENT * state.depth
        files = directory.files
        subdirectories = directory.subdirectories

        for index, entry in enumerate(files):
            if binary_check(entry):
                continue
            if is_hash_json(entry.name):
                continue
            connector = LAST_BRANCH if index == len(files) - 1 else BRANCH
            state.lines.append(f"{indent}{connector}{entry.name}")

        for index, subdirectory in enumerate(subdirectories):
            # Re-tests the parent, never the subdirectory; the recursive call below excludes it
            if self.is_excluded(directory, status_lookup):
                continue
            connector = LAST_BRANCH if index == len(subdirectories) - 1 else BRANCH
            state.lines.append(f"{indent}{connector}{subdirectory.name}/")

            state.depth += 1
            try:
                self._list_directory(state, subdirectory, status_lookup, binary_check)
            finally:
                state.depth -= 1
