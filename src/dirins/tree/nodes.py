"""Node representation for directory snapshots."""

from typing import Any, Callable, Optional, Tuple

from anytree import Node


class FileEntry(Node):  # type: ignore
    """Node class representing a file inside a directory snapshot.

    Attributes:
        name (str): The file name (just the basename).
        parent (Optional[DirectoryNode]): The directory that lists this file.
        is_binary (bool): True if the file's content type is binary.
        virtual_path (Optional[str]): Opaque identifier for the file, the file-system
            path for snapshots of local directories.

    Example:
        >>> root = DirectoryNode("root")
        >>> entry = FileEntry("logo.png", parent=root, is_binary=True)
        >>> entry.is_binary
        True
        >>> [f.name for f in root.files]
        ['logo.png']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["DirectoryNode"] = None,
        is_binary: bool = False,
        virtual_path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_binary = is_binary
        self.virtual_path = virtual_path


class DirectoryNode(Node):  # type: ignore
    """Node class representing a directory inside a directory snapshot.

    Extends anytree.Node with separate ordered views of the directory's files and
    subdirectories. Both views keep the order in which children were attached, which
    is the listing order reported by whatever built the snapshot.

    Children can be attached eagerly, by creating child nodes with ``parent=`` set to
    this node, or lazily through a loader. The loader is called at most once, on the
    first access to ``files`` or ``subdirectories``, and is expected to attach the
    directory's children. This keeps directories that are never visited (for example
    ignored ones) from ever being enumerated.

    Attributes:
        name (str): The directory name (just the basename).
        parent (Optional[DirectoryNode]): The parent directory in the snapshot.
        virtual_path (Optional[str]): Opaque identifier for the directory, the
            file-system path for snapshots of local directories.

    Example:
        >>> root = DirectoryNode("project")
        >>> src = DirectoryNode("src", parent=root)
        >>> readme = FileEntry("README.md", parent=root)
        >>> [f.name for f in root.files]
        ['README.md']
        >>> [d.name for d in root.subdirectories]
        ['src']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["DirectoryNode"] = None,
        virtual_path: Optional[str] = None,
        loader: Optional[Callable[["DirectoryNode"], None]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.virtual_path = virtual_path
        self._loader = loader
        self._loaded = loader is None

    @property
    def is_loaded(self) -> bool:
        """True once the directory's children are attached."""
        return self._loaded

    def load(self) -> None:
        """Attach the directory's children by running the loader, if not done yet."""
        if self._loaded:
            return
        self._loaded = True
        if self._loader is not None:
            self._loader(self)

    @property
    def files(self) -> Tuple[FileEntry, ...]:
        """Files directly inside this directory, in listing order."""
        self.load()
        return tuple(child for child in self.children if isinstance(child, FileEntry))

    @property
    def subdirectories(self) -> Tuple["DirectoryNode", ...]:
        """Directories directly inside this directory, in listing order."""
        self.load()
        return tuple(child for child in self.children if isinstance(child, DirectoryNode))
