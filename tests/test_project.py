"""Tests for the ProjectContext collaborators."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from dirins.project import ProjectContext
from dirins.status.base_status import NullStatusLookup
from dirins.status.gitignore_status import GitIgnoreStatusLookup


@pytest.fixture
def project_root(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("pass")
    (tmp_path / "README.md").write_text("# readme")
    return tmp_path


def test_defaults(project_root):
    project = ProjectContext(project_root)
    assert project.root == project_root
    assert isinstance(project.status_lookup, GitIgnoreStatusLookup)
    assert project.status_lookup.root == project_root


def test_custom_status_lookup(project_root):
    lookup = NullStatusLookup()
    assert ProjectContext(project_root, status_lookup=lookup).status_lookup is lookup


def test_lookup_relative_path(project_root):
    project = ProjectContext(project_root)
    assert project.lookup_file("src") == project_root / "src"
    assert project.lookup_file("src/../README.md") == project_root / "README.md"


def test_lookup_absolute_path(project_root):
    project = ProjectContext(project_root)
    assert project.lookup_file(str(project_root / "src")) == project_root / "src"


def test_lookup_missing_path(project_root):
    assert ProjectContext(project_root).lookup_file("nope") is None


def test_find_directory(project_root):
    node = ProjectContext(project_root).find_directory(project_root / "src")
    assert node is not None
    assert node.name == "src"
    assert [f.name for f in node.files] == ["main.py"]


def test_find_directory_on_file(project_root):
    assert ProjectContext(project_root).find_directory(project_root / "README.md") is None


def test_read_snapshot_is_reentrant_and_released(project_root):
    project = ProjectContext(project_root)

    with project.read_snapshot() as view:
        assert view is project
        with project.read_snapshot():
            pass

    # Another thread can take the view once released
    acquired = []

    def take_view():
        if project._read_lock.acquire(timeout=1):
            acquired.append(True)
            project._read_lock.release()

    worker = threading.Thread(target=take_view)
    worker.start()
    worker.join()
    assert acquired == [True]


def test_read_snapshot_released_on_error(project_root):
    project = ProjectContext(project_root)

    with pytest.raises(RuntimeError):
        with project.read_snapshot():
            raise RuntimeError("boom")

    assert project._read_lock.acquire(blocking=False)
    project._read_lock.release()


def test_executor_is_created_once_and_closed(project_root):
    with ProjectContext(project_root) as project:
        executor = project.executor
        assert isinstance(executor, ThreadPoolExecutor)
        assert project.executor is executor
        assert executor.submit(lambda: 42).result() == 42

    assert project._executor is None
