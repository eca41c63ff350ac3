"""Lazily loaded snapshots of local directories."""

import os
from pathlib import Path
from typing import Callable, FrozenSet, Optional

from dirins.tree.binary_detector import is_binary_file
from dirins.tree.file_identifier import FileIdentifier
from dirins.tree.nodes import DirectoryNode, FileEntry
from dirins.types import PathType

BinaryFileCheck = Callable[[PathType], bool]


def build_directory_node(path: PathType, binary_check: BinaryFileCheck = is_binary_file) -> DirectoryNode:
    """Build a snapshot node for a local directory.

    The returned node lists its children on first access, and so does every
    subdirectory node below it, so directories that are never visited are never
    read. Entries are sorted by name, which keeps the listing order stable.

    Symlinks are classified by their target and broken symlinks are listed as files.
    A symlink leading back to one of its own ancestor directories is listed as an
    empty directory. Files whose binary check fails with an OSError are treated as
    binary, and a directory that cannot be listed has no children.

    Args:
        path: The directory to snapshot.
        binary_check: Decides whether a file is binary from its path. Defaults to
            is_binary_file.

    Returns:
        The snapshot root. Its ``virtual_path`` is the absolute path of the directory.

    Raises:
        FileNotFoundError: If the path doesn't exist.
        NotADirectoryError: If the path isn't a directory.

    Example:
        >>> root = build_directory_node(".")  # doctest: +SKIP
        >>> [f.name for f in root.files]  # doctest: +SKIP
        ['README.md', 'pyproject.toml']
    """
    directory = Path(os.path.abspath(path))
    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    return _directory_node(directory, binary_check, frozenset())


def _directory_node(
    directory: Path,
    binary_check: BinaryFileCheck,
    ancestors: FrozenSet[FileIdentifier],
    parent: Optional[DirectoryNode] = None,
) -> DirectoryNode:
    file_id = FileIdentifier.from_path(directory)
    if file_id is not None and file_id in ancestors:
        # Symlink loop
        return DirectoryNode(directory.name, parent=parent, virtual_path=str(directory))

    lineage = ancestors | {file_id} if file_id is not None else ancestors

    def load(node: DirectoryNode) -> None:
        _load_children(node, directory, binary_check, lineage)

    return DirectoryNode(directory.name, parent=parent, virtual_path=str(directory), loader=load)


def _load_children(
    node: DirectoryNode,
    directory: Path,
    binary_check: BinaryFileCheck,
    ancestors: FrozenSet[FileIdentifier],
) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError:
        return

    for entry in entries:
        entry_path = Path(entry.path)
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False

        if is_dir:
            _directory_node(entry_path, binary_check, ancestors, parent=node)
        else:
            FileEntry(
                entry.name,
                parent=node,
                is_binary=_is_binary(entry_path, binary_check),
                virtual_path=str(entry_path),
            )


def _is_binary(path: Path, binary_check: BinaryFileCheck) -> bool:
    try:
        return binary_check(path)
    except OSError:
        return True
