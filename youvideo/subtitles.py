"""Reading closed captions from subtitle files."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

_TIMESTAMP = re.compile(r"^(?:(\d+):)?(\d{1,2}):(\d{1,2})(?:[.,](\d+))?$")
_HTML_TAG = re.compile(r"<[^>]*>")
_ASS_OVERRIDE = re.compile(r"\{[^}]*\}")
_ASS_NEWLINE = re.compile(r"\\[Nn]")


@dataclass
class CC:
    """One caption: its number, time span and first line of text."""

    index: int
    start_time: timedelta
    end_time: timedelta
    text: str


def _parse_timestamp(value: str) -> timedelta:
    match = _TIMESTAMP.match(value.strip())
    if match is None:
        raise ValueError(f"invalid timestamp {value!r}")
    hours, minutes, seconds, fraction = match.groups()
    micro = 0
    if fraction:
        micro = round(int(fraction) * 1_000_000 / 10 ** len(fraction))
    return timedelta(
        hours=int(hours or 0),
        minutes=int(minutes),
        seconds=int(seconds),
        microseconds=micro,
    )


def _first_item(lines: list[str], strip_markup: Callable[[str], list[str]]) -> str:
    if not lines:
        raise ValueError("caption has no text")
    for segment in strip_markup(lines[0].strip()):
        if segment:
            return segment
    return ""


def _html_segments(line: str) -> list[str]:
    return _HTML_TAG.split(line)


def _normalise(text: str) -> str:
    return text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def _parse_cue_blocks(text: str, numbered: bool) -> list[CC]:
    captions: list[CC] = []
    for block in re.split(r"\n[ \t]*\n", _normalise(text).strip()):
        lines = block.split("\n")
        timing = next((i for i, line in enumerate(lines) if "-->" in line), None)
        if timing is None:
            continue
        start_text, _, end_text = lines[timing].partition("-->")
        end_fields = end_text.split()
        if not end_fields:
            raise ValueError(f"invalid timing line {lines[timing]!r}")
        index = len(captions) + 1
        if numbered and timing > 0 and lines[timing - 1].strip().isdigit():
            index = int(lines[timing - 1].strip())
        body = [line for line in lines[timing + 1:] if line.strip()]
        captions.append(
            CC(
                index=index,
                start_time=_parse_timestamp(start_text),
                end_time=_parse_timestamp(end_fields[0]),
                text=_first_item(body, _html_segments),
            )
        )
    return captions


def parse_srt(text: str) -> list[CC]:
    """Parse SubRip text into captions, in file order."""
    return _parse_cue_blocks(text, numbered=True)


def _parse_vtt(text: str) -> list[CC]:
    return _parse_cue_blocks(text, numbered=False)


def _parse_ass(text: str) -> list[CC]:
    captions: list[CC] = []
    in_events = False
    fields: list[str] | None = None
    for raw in _normalise(text).split("\n"):
        line = raw.strip()
        if line.startswith("["):
            in_events = line.lower() == "[events]"
            continue
        if not in_events:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        if key == "format":
            fields = [name.strip().lower() for name in value.split(",")]
        elif key == "dialogue":
            if fields is None:
                raise ValueError("dialogue line before format line")
            parts = [part.strip() for part in value.split(",", len(fields) - 1)]
            record = dict(zip(fields, parts))
            body = [
                part
                for part in _ASS_NEWLINE.split(_ASS_OVERRIDE.sub("", record.get("text", "")))
                if part.strip()
            ]
            captions.append(
                CC(
                    index=len(captions) + 1,
                    start_time=_parse_timestamp(record.get("start", "")),
                    end_time=_parse_timestamp(record.get("end", "")),
                    text=_first_item(body, lambda line: [line]),
                )
            )
    return captions


_PARSERS: dict[str, Callable[[str], list[CC]]] = {
    ".srt": parse_srt,
    ".vtt": _parse_vtt,
    ".ass": _parse_ass,
    ".ssa": _parse_ass,
}


def get_close_caption(path: str | os.PathLike[str]) -> list[CC]:
    """Read the captions of a subtitle file, chosen by its extension.

    Raises ``ValueError`` for an unsupported extension or malformed content
    and ``OSError`` when the file cannot be read.
    """
    extension = os.path.splitext(os.fspath(path))[1].lower()
    parser = _PARSERS.get(extension)
    if parser is None:
        raise ValueError(f"unsupported subtitle format {extension!r}")
    with open(path, encoding="utf-8-sig") as handle:
        return parser(handle.read())