"""Finding video files inside a library directory."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator

# Matched as plain name suffixes; a name is reported once per matching entry.
TARGET_EXTENSIONS = (
    "mp4", "mkv", "avi", "rmvb", "flv", "wmv", "mov", "3gp", "m4v", "mpg",
    "mpeg", "mpe", "mpv", "m2v", "m4v", "m4p", "m4b", "m4r", "m4v", "m4a",
    "m4p", "m4b", "m4r", "m4v", "m4a", "m4p", "m4b", "m4r", "m4v", "m4a",
)


def _matches(path: str, name: str, size: int) -> Iterator[str]:
    if name.startswith(".") or size == 0:
        return
    for extension in TARGET_EXTENSIONS:
        if name.endswith(extension):
            yield path


def _walk_dir(path: str, excluded: frozenset[str]) -> Iterator[str]:
    try:
        with os.scandir(path) as entries:
            children = sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in children:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            size = 0 if is_dir else entry.stat(follow_symlinks=False).st_size
        except OSError:
            continue
        if is_dir:
            if entry.name not in excluded:
                yield from _walk_dir(entry.path, excluded)
        else:
            yield from _matches(entry.path, entry.name, size)


def scan_video(library_path: str, exclude_dir: Iterable[str]) -> list[str]:
    """Return the video files under ``library_path`` in lexical walk order.

    Directories whose name is in ``exclude_dir`` are skipped, as are hidden
    and empty files. Raises ``FileNotFoundError`` if ``library_path`` is missing.
    """
    excluded = frozenset(exclude_dir or ())
    info = os.lstat(library_path)
    name = os.path.basename(os.path.normpath(library_path))
    if stat.S_ISDIR(info.st_mode):
        if name in excluded:
            return []
        return list(_walk_dir(library_path, excluded))
    return list(_matches(library_path, name, info.st_size))