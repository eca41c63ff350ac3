"""Tests for combining status lookups."""

import pytest

from dirins.status.base_status import BaseStatusLookup, FileStatus, NullStatusLookup
from dirins.status.composite_status import CompositeStatusLookup


class FixedStatus(BaseStatusLookup):
    def __init__(self, status):
        self.status = status

    def get_status(self, path):
        return self.status


def test_empty_lookups_rejected():
    with pytest.raises(ValueError):
        CompositeStatusLookup([])


def test_invalid_member_rejected():
    with pytest.raises(TypeError) as excinfo:
        CompositeStatusLookup([NullStatusLookup(), "not a lookup"])
    assert "index 1" in str(excinfo.value)


def test_any_ignored_wins():
    composite = CompositeStatusLookup([FixedStatus(FileStatus.NOT_CHANGED), FixedStatus(FileStatus.IGNORED)])
    assert composite.get_status("x") is FileStatus.IGNORED
    assert composite.is_ignored("x")


def test_first_known_status():
    composite = CompositeStatusLookup([FixedStatus(FileStatus.UNKNOWN), FixedStatus(FileStatus.NOT_CHANGED)])
    assert composite.get_status("x") is FileStatus.NOT_CHANGED


def test_all_unknown():
    composite = CompositeStatusLookup([FixedStatus(FileStatus.UNKNOWN)])
    assert composite.get_status("x") is FileStatus.UNKNOWN


def test_add_lookup():
    composite = CompositeStatusLookup([NullStatusLookup()])
    composite.add_lookup(FixedStatus(FileStatus.IGNORED))
    assert composite.is_ignored("x")
    with pytest.raises(TypeError):
        composite.add_lookup(object())


def test_rules_not_supported():
    composite = CompositeStatusLookup([NullStatusLookup()])
    with pytest.raises(NotImplementedError):
        composite.add_rule("*.log")
    with pytest.raises(NotImplementedError):
        composite.load_rules("rules.txt")
