import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("diskusage")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


def make_file(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sized_tree(tmp_path):
    """Children of 300 (a directory), 200 and 100 bytes."""
    make_file(tmp_path / "big" / "a.bin", 150)
    make_file(tmp_path / "big" / "nested" / "b.bin", 150)
    make_file(tmp_path / "mid.txt", 200)
    make_file(tmp_path / "small.txt", 100)
    return tmp_path


@pytest.fixture
def real_scandir():
    return os.scandir


class _FlakyEntry:
    def __init__(self, entry, stat_fails):
        self._entry = entry
        self.name = entry.name
        self.path = entry.path
        self._stat_fails = stat_fails

    def stat(self, follow_symlinks=True):
        if self._stat_fails:
            raise PermissionError(13, "Permission denied", self.path)
        return self._entry.stat(follow_symlinks=follow_symlinks)


class _FlakyListing:
    """Name-ordered listing that can fail part way through."""

    def __init__(self, entries, fail_after=None):
        self._entries = iter(entries)
        self._left = fail_after

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        return self

    def __next__(self):
        if self._left is not None:
            if self._left == 0:
                raise OSError(5, "Input/output error")
            self._left -= 1
        return next(self._entries)


def flaky_scandir(real, stat_fails=(), broken_dir=None, fail_after=0):
    """``os.scandir`` stand-in: ``stat`` fails for names in ``stat_fails``,
    listing ``broken_dir`` raises after ``fail_after`` entries."""
    def scandir(path):
        with real(path) as it:
            entries = sorted(it, key=lambda e: e.name)
        limit = fail_after if os.path.basename(path) == broken_dir else None
        return _FlakyListing([_FlakyEntry(e, e.name in stat_fails) for e in entries], limit)
    return scandir
