"""Directory snapshots and their text tree rendering.

This package provides the node model for directory snapshots, a builder for
snapshots of local directories, and the renderer that turns a snapshot into
an indented text tree.
"""

from .nodes import DirectoryNode, FileEntry
from .tree_renderer import METADATA_DIRECTORY_NAME, RenderState, TreeRenderer

__all__ = [
    "DirectoryNode",
    "FileEntry",
    "METADATA_DIRECTORY_NAME",
    "RenderState",
    "TreeRenderer",
]
