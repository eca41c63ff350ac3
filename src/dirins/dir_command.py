"""The ``dir`` command: list a project directory as an indented tree.

The command resolves the requested path in the caller's thread, then renders the
tree as a unit of work on the project's background executor while holding the
project's read view. The caller blocks on the result. Every outcome, including
"File not found: <path>" and "Directory not found: <path>", is returned as a
string; callers tell failures apart by the text.

Example output for ``dir myDirectory``::

    myDirectory/
      ├── file1.txt
      └── file2.txt
      └── subDirectory/
        └── file3.txt
"""

from concurrent.futures import Future
from pathlib import Path

from dirins.exceptions import DirectoryNotFoundError, PathNotFoundError
from dirins.project import ProjectContext
from dirins.tree.tree_renderer import TreeRenderer

COMMAND_NAME = "dir"


class DirCommand:
    """Lists the files and directories below a path of a project.

    Attributes:
        project (ProjectContext): The project the path belongs to.
        dir (str): The requested path, relative to the project root or absolute. It is
            used verbatim as the first line of the tree and in not-found messages.
    """

    command_name = COMMAND_NAME

    def __init__(self, project: ProjectContext, dir: str) -> None:
        self.project = project
        self.dir = dir
        self.renderer = TreeRenderer(status_lookup=project.status_lookup)

    def submit(self) -> "Future[str]":
        """Start the listing in the background.

        Returns:
            A future that completes with the listing text. If the path cannot be
            resolved at all, the future is already completed with the not-found
            message and no work is scheduled.
        """
        virtual_file = self.project.lookup_file(self.dir)
        if virtual_file is None:
            future: "Future[str]" = Future()
            future.set_result(str(PathNotFoundError(self.dir)))
            return future

        return self.project.executor.submit(self._run, virtual_file)

    def execute(self) -> str:
        """Run the listing and wait for its text. Blocks until the work completes."""
        return self.submit().result()

    def _run(self, virtual_file: Path) -> str:
        with self.project.read_snapshot():
            directory = self.project.find_directory(virtual_file)
            if directory is None:
                return str(DirectoryNotFoundError(self.dir))
            return self.renderer.render(directory, header=self.dir)


def execute(project: ProjectContext, path: str) -> str:
    """List ``path`` of ``project``; shorthand for ``DirCommand(project, path).execute()``."""
    return DirCommand(project, path).execute()
