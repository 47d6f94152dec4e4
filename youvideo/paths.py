"""Path helpers for moving, renaming and classifying media files."""

from __future__ import annotations

import os
import shutil

_SUBTITLE_EXTENSIONS = frozenset({".srt", ".ass", ".ssa", ".vtt"})


def _ext(path: str) -> str:
    """Return the extension of the last path element, dot included.

    Everything from the last dot of the final element counts, so
    ``".hidden"`` has the extension ``".hidden"``.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _base(path: str) -> str:
    """Return the last element of ``path``, ignoring trailing separators."""
    if not path:
        return "."
    separators = os.sep + (os.altsep or "")
    stripped = path.rstrip(separators)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def get_move_path(path: str, source_path: str, target_path: str) -> str:
    """Map ``path`` inside ``source_path`` to the same place inside ``target_path``.

    Raises ``ValueError`` when ``path`` cannot be expressed relative to
    ``source_path``.
    """
    if os.path.isabs(path) != os.path.isabs(source_path):
        raise ValueError(f"can't make {path!r} relative to {source_path!r}")
    relative = os.path.relpath(path, source_path)
    return os.path.normpath(os.path.join(target_path, relative))


def check_file_exist(path: str | os.PathLike[str]) -> bool:
    """Return True when something exists at ``path``."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def change_file_name_without_ext(filename: str, new_name: str) -> str:
    """Return ``new_name`` carrying the extension of ``filename``'s base name."""
    return f"{new_name}{_ext(_base(filename))}"


def copy_file(source: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Copy ``source`` into ``dest``, creating ``dest`` if needed.

    An existing ``dest`` is written over from its start and is not
    truncated, so bytes past the copied length are kept.
    """
    with open(source, "rb") as src:
        flags = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)
        fd = os.open(dest, flags, 0o644)
        with os.fdopen(fd, "wb") as dst:
            shutil.copyfileobj(src, dst)


def is_subtitles_file(path: str) -> bool:
    """Return True when ``path`` has a subtitle extension."""
    return _ext(path) in _SUBTITLE_EXTENSIONS