"""File helpers: existence, size, timestamps, reading into buffers."""

from __future__ import annotations

import os
import shutil
from typing import Optional

from .logger import check, error

StrPath = "str | os.PathLike[str]"


def _require_path(path) -> None:
    check(os.fspath(path) != "", "No filePath supplied!")


def get_timestamp(path) -> int:
    """Last modification time in whole seconds, or 0 if it cannot be read."""
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return 0


def file_exists(path) -> bool:
    """Whether *path* exists."""
    _require_path(path)
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def get_file_size(path) -> Optional[int]:
    """Size of the file in bytes, or None if it cannot be determined."""
    try:
        return os.stat(path).st_size
    except OSError:
        return None


def read_file(path, buffer) -> Optional[memoryview]:
    """Read a whole file into *buffer* followed by a zero byte.

    Returns a view of the file's bytes inside *buffer*, or None when the file
    cannot be opened, does not fit, or cannot be read. An empty file yields an
    empty view, so test the result against None.
    """
    view = memoryview(buffer).cast("B")
    try:
        with open(path, "rb") as file:
            file.seek(0, os.SEEK_END)
            size = file.tell()
            if size > len(view) - 1:
                error("Buffer too small or invalid for File: {}", os.fspath(path))
                return None
            file.seek(0)
            target = view[:size]
            if file.readinto(target) != size:
                return None
    except OSError:
        error("Failed opening File: {}", os.fspath(path))
        return None
    view[size] = 0
    return view[:size]


def write_file(path, data) -> None:
    """Write *data* to *path*, replacing its contents."""
    _require_path(path)
    check(len(data) > 0, "No buffer supplied!")
    try:
        with open(path, "wb") as file:
            file.write(data)
    except OSError:
        error("Failed opening File for write: {}", os.fspath(path))


def copy_file(src, dest) -> bool:
    """Copy *src* over *dest*; return whether it succeeded."""
    try:
        shutil.copyfile(src, dest)
    except OSError:
        return False
    return True