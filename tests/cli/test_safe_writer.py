"""Unit tests for the SafeWriter class in the dirins CLI."""

import errno
from unittest.mock import MagicMock, patch

import pytest

from dirins.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Replace the signal handler seen by SafeWriter."""
    with patch("dirins.cli.safe_writer.signal_handler") as mock:
        mock.interrupted = False
        yield mock


def test_init_with_fd():
    writer = SafeWriter(3)
    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_init_with_path(tmp_path):
    path = tmp_path / "out.txt"
    with SafeWriter(path) as writer:
        assert writer._file_obj is not None
        assert writer.fd == writer._file_obj.fileno()
    assert path.exists()


def test_init_with_invalid_type():
    with pytest.raises(TypeError) as excinfo:
        SafeWriter(42.0)
    assert "Expected int, str, or PathLike" in str(excinfo.value)


def test_write_to_file(tmp_path, mock_signals):
    path = tmp_path / "out.txt"
    with SafeWriter(str(path)) as writer:
        writer.write("root/\n")
        writer.write("  └── a.txt\n")
    assert path.read_text(encoding="utf-8") == "root/\n  └── a.txt\n"


def test_write_retries_partial_writes(mock_signals):
    with patch("os.write", side_effect=[2, 3]) as mock_write:
        SafeWriter(3).write("hello")
    assert mock_write.call_args_list[0].args == (3, b"hello")
    assert mock_write.call_args_list[1].args == (3, b"llo")


def test_write_after_close():
    writer = SafeWriter(3)
    writer.close()
    with pytest.raises(ValueError) as excinfo:
        writer.write("data")
    assert "Cannot write to closed SafeWriter" in str(excinfo.value)


def test_write_when_interrupted(mock_signals):
    mock_signals.interrupted = True
    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("data")
    mock_write.assert_not_called()


def test_write_epipe_becomes_broken_pipe(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("data")


def test_write_other_errors_propagate(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EIO, "I/O error")):
        with pytest.raises(OSError) as excinfo:
            SafeWriter(3).write("data")
    assert excinfo.value.errno == errno.EIO


def test_close_ignores_broken_pipe():
    writer = SafeWriter(3)
    writer._file_obj = MagicMock()
    writer._file_obj.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer.close()
    assert writer._closed


def test_exit_prefers_block_exception():
    writer = SafeWriter(3)
    writer._file_obj = MagicMock()
    writer._file_obj.close.side_effect = OSError(errno.EIO, "I/O error")
    with pytest.raises(KeyError):
        with writer:
            raise KeyError("original")
