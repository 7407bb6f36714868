"""Reads and writes golden files as raw bytes."""

import os
import stat
import tempfile


def load(path):
    """Returns the file's bytes, or None when it does not exist.

    Any other OSError propagates.
    """
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except FileNotFoundError:
        return None


def save(path, data):
    path = os.fspath(path)
    directory, name = os.path.split(os.path.abspath(path))
    previous_mode = _existing_mode(path)
    with tempfile.NamedTemporaryFile(
        "wb", dir=directory, prefix=name + ".", suffix=".tmp", delete=False
    ) as handle:
        tmp = handle.name
        try:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        except OSError:
            handle.close()
            os.remove(tmp)
            raise
    try:
        if previous_mode is not None:
            os.chmod(tmp, previous_mode)
        os.replace(tmp, path)
    except OSError:
        os.remove(tmp)
        raise
    _set_snapshot_mode(path)


def _existing_mode(path):
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return None


def _set_snapshot_mode(path):
    mode = os.stat(path).st_mode
    os.chmod(path, (mode & ~0o111) | stat.S_IWUSR | stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)
