"""Helpers for dictionaries of request data."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from typing import Any


def filter_map_key(data: MutableMapping[str, Any], can_include: Iterable[str]) -> None:
    """Remove from ``data``, in place, every key not listed in ``can_include``."""
    allowed = set(can_include)
    for key in [key for key in data if key not in allowed]:
        del data[key]