"""Unit tests for the argument parser module in the dirins CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dirins.cli.argparser import create_exclusion_action, create_parser, validate_args
from dirins.status.gitignore_status import GitIgnoreStatusLookup


@pytest.fixture
def mock_status_lookup():
    """Create a mock status lookup."""
    return MagicMock(spec=GitIgnoreStatusLookup)


def test_create_exclusion_action(mock_status_lookup):
    ExclusionAction = create_exclusion_action(mock_status_lookup)
    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"


def test_parser_defaults(mock_status_lookup):
    args = create_parser(mock_status_lookup).parse_args(["src"])
    assert args.path == "src"
    assert args.project == Path(".")
    assert args.exclude is None
    assert args.ignore is None
    assert args.no_gitignore is False
    assert args.output is None
    assert args.summary is None
    assert args.tokenizer is None


def test_rules_applied_in_command_line_order(mock_status_lookup, tmp_path):
    rules_file = tmp_path / "extra.ignore"
    rules_file.write_text("dist/\n")
    calls = []
    mock_status_lookup.load_rules.side_effect = lambda f: calls.append(("file", Path(f)))
    mock_status_lookup.add_rule.side_effect = lambda r: calls.append(("rule", r))

    args = create_parser(mock_status_lookup).parse_args(
        ["-i", "build/", "-e", str(rules_file), "-i", "!build/keep/", "."]
    )

    assert calls == [("rule", "build/"), ("file", rules_file), ("rule", "!build/keep/")]
    assert args.ignore == ["build/", "!build/keep/"]
    assert args.exclude == [rules_file]


def test_missing_rules_file_is_usage_error(tmp_path, capsys):
    lookup = GitIgnoreStatusLookup(tmp_path, load_default=False)
    with pytest.raises(SystemExit) as excinfo:
        create_parser(lookup).parse_args(["-e", str(tmp_path / "missing.ignore"), "."])
    assert excinfo.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_summary_choices(mock_status_lookup):
    parser = create_parser(mock_status_lookup)
    assert parser.parse_args(["-s", "stderr", "."]).summary == "stderr"
    with pytest.raises(SystemExit):
        parser.parse_args(["-s", "nowhere", "."])


def test_version(mock_status_lookup, capsys):
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_status_lookup).parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirins ")


def test_validate_args_summary_file_requires_output(tmp_path):
    args = argparse.Namespace(summary="file", output=None, project=tmp_path)
    with pytest.raises(ValueError) as excinfo:
        validate_args(args)
    assert "--summary=file requires -o/--output" in str(excinfo.value)


def test_validate_args_project_must_be_directory(tmp_path):
    args = argparse.Namespace(summary=None, output=None, project=tmp_path / "missing")
    with pytest.raises(ValueError) as excinfo:
        validate_args(args)
    assert "Project root is not a directory" in str(excinfo.value)


def test_validate_args_ok(tmp_path):
    validate_args(argparse.Namespace(summary="file", output=tmp_path / "out.txt", project=tmp_path))
