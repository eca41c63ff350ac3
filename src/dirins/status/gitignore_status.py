"""Path status lookup backed by .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dirins.types import PathType

from .base_status import BaseStatusLookup, FileStatus


class GitIgnoreStatusLookup(BaseStatusLookup):
    """Status lookup that marks paths matching .gitignore patterns as IGNORED.

    Paths are matched relative to ``root`` using the pathspec library, the same way
    Git matches them. Directories are matched with a trailing slash so that
    directory-only patterns such as ``build/`` apply to them. Negation patterns
    (``!keep/``) are honoured, with later rules overriding earlier ones.

    Rules come from three places, in this order: ``root/.gitignore`` when
    ``load_default`` is True and the file exists, the given ``rules_files``, and any
    rules added later with ``load_rules()`` or ``add_rule()``.

    Paths outside ``root`` are UNKNOWN. The root itself is never ignored.

    Attributes:
        root (Path): Absolute directory that patterns are anchored to.
        spec (PathSpec): Compiled pattern matcher over all rules loaded so far.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     os.mkdir(os.path.join(tmp, "build"))
        ...     lookup = GitIgnoreStatusLookup(tmp, load_default=False)
        ...     lookup.add_rule("build/")
        ...     lookup.get_status(os.path.join(tmp, "build")).value
        'ignored'
    """

    DEFAULT_RULES_FILE = ".gitignore"

    def __init__(
        self,
        root: PathType,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        load_default: bool = True,
    ) -> None:
        """Initialize the lookup.

        Args:
            root: Directory that patterns are anchored to.
            rules_files: Path(s) to extra files containing .gitignore patterns.
            load_default: Whether to load ``root/.gitignore`` if it exists.

        Raises:
            FileNotFoundError: If any of ``rules_files`` does not exist.
        """
        self.root = Path(os.path.abspath(root))
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if load_default:
            self.load_default_rules()

        if rules_files is not None:
            self.load_rules(rules_files)

    def get_status(self, path: Optional[PathType]) -> FileStatus:
        """Look up the status of a path.

        Args:
            path: Absolute path, or a path relative to ``root``.

        Returns:
            IGNORED if the path matches the loaded rules, NOT_CHANGED if it does not,
            UNKNOWN if the path is None or lies outside ``root``.
        """
        if path is None:
            return FileStatus.UNKNOWN

        absolute = Path(path) if Path(path).is_absolute() else self.root / path
        try:
            relative = Path(os.path.abspath(absolute)).relative_to(self.root)
        except ValueError:
            return FileStatus.UNKNOWN

        if relative == Path("."):
            return FileStatus.NOT_CHANGED

        candidate = relative.as_posix()
        if absolute.is_dir():
            candidate += "/"

        return FileStatus.IGNORED if self.spec.match_file(candidate) else FileStatus.NOT_CHANGED

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def set_root(self, root: PathType) -> None:
        """Re-anchor all rules at another directory."""
        self.root = Path(os.path.abspath(root))

    def load_default_rules(self) -> bool:
        """Load ``root/.gitignore`` ahead of all rules loaded so far, so those keep precedence.

        Returns:
            True if the file existed and was loaded.
        """
        default_rules = self.root / self.DEFAULT_RULES_FILE
        if not default_rules.is_file():
            return False

        with open(default_rules, "r") as f:
            self._lines[:0] = f.read().splitlines()
        self._compile()
        return True

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern (e.g. ``"*.log"``, ``"dist/"``, ``"!keep/"``)."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
