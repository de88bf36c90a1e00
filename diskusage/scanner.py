from __future__ import annotations
import os
import stat as statmod
import logging

logger = logging.getLogger(__name__)

# Longest composed path we are willing to stat, in bytes (PATH_MAX on Linux).
MAX_PATH = 4096


def path_too_long(path: str) -> bool:
    return len(os.fsencode(path)) >= MAX_PATH


def compute_size(path: str, verbose: bool = False) -> int:
    """Total bytes of the regular files under ``path``.

    Symlinks are never followed. Directories contribute only what lies
    beneath them; symlinks, devices, sockets and fifos contribute nothing.
    Unreadable directories and entries are skipped, and only reported when
    ``verbose`` is set. Returns 0 for a path that cannot be opened.
    """
    if not path:
        return 0

    total = 0
    try:
        it = os.scandir(path)
    except OSError as e:
        if verbose:
            logger.warning("Cannot open directory: %s (%s)", path, e.strerror or e)
        return 0

    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                # readdir failed mid-listing; keep what we have
                if verbose:
                    logger.warning("Cannot read directory: %s (%s)", path, e.strerror or e)
                break

            full_path = entry.path
            if path_too_long(full_path):
                if verbose:
                    logger.warning("Path too long, skipping: %s", full_path)
                continue

            try:
                st = entry.stat(follow_symlinks=False)
            except OSError as e:
                if verbose:
                    logger.warning("Cannot stat: %s (%s)", full_path, e.strerror or e)
                continue

            mode = st.st_mode
            if statmod.S_ISDIR(mode):
                total += compute_size(full_path, verbose)
            elif statmod.S_ISREG(mode):
                total += st.st_size
    return total
