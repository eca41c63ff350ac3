"""Directory listing for language model context.

This package renders a directory as an indented text tree, skipping binary
files, generated cache files, IDE metadata and ignored directories.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirins")
except PackageNotFoundError:
    __version__ = "unknown"
