"""Tests for the home/cwd/tmp accessors."""

import os
import tempfile

import pytest

from pathmix.core.path_utils import join
from pathmix.core.system_dirs import cwd, home, home_dir, tmp, tmp_dir

SEGMENT_LISTS = [
    (".ssh",),
    (".config", "app"),
    ("a", "..", "b", "c.txt"),
    ("nested/inside", "file"),
]


@pytest.fixture()
def fake_tmp(monkeypatch, tmp_path):
    target = tmp_path / "tmpdir"
    target.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(target))
    return str(target)


def test_home_without_segments_is_os_home(fake_home):
    assert home() == fake_home
    assert home_dir() == os.path.expanduser("~")


@pytest.mark.parametrize("segments", SEGMENT_LISTS)
def test_home_joins_segments(fake_home, segments):
    assert home(*segments) == join(fake_home, *segments)


def test_cwd_tracks_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert cwd() == os.getcwd()
    assert cwd("src", "index.py") == os.path.join(os.getcwd(), "src", "index.py")


@pytest.mark.parametrize("segments", SEGMENT_LISTS)
def test_cwd_joins_segments(segments):
    assert cwd(*segments) == join(os.getcwd(), *segments)


def test_tmp_without_segments_is_os_tempdir(fake_tmp):
    assert tmp() == fake_tmp
    assert tmp_dir() == fake_tmp


@pytest.mark.parametrize("segments", SEGMENT_LISTS)
def test_tmp_joins_segments(fake_tmp, segments):
    assert tmp(*segments) == join(fake_tmp, *segments)


def test_accessors_requery_each_call(monkeypatch, tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    monkeypatch.setenv("HOME", str(first))
    monkeypatch.setenv("USERPROFILE", str(first))
    assert home() == str(first)
    monkeypatch.setenv("HOME", str(second))
    monkeypatch.setenv("USERPROFILE", str(second))
    assert home() == str(second)


@pytest.mark.parametrize("accessor", [home, cwd, tmp])
def test_results_are_absolute(accessor):
    assert os.path.isabs(accessor())
    assert os.path.isabs(accessor("x", "y"))


@pytest.mark.parametrize("segments", [("/etc",), ("/etc", "hosts"), ("a", "/b")])
def test_absolute_segments_stay_under_home(fake_home, segments):
    relative = [s.lstrip("/") for s in segments]
    assert home(*segments) == join(fake_home, *relative)


def test_absolute_segments_stay_under_cwd_and_tmp(fake_tmp, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert cwd("/src") == os.path.join(os.getcwd(), "src")
    assert tmp("/session-1") == os.path.join(fake_tmp, "session-1")
