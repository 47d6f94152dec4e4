"""Video library helpers: scanning, checksums, subtitles, Bangumi lookups, search index bookkeeping and a transcoding client."""

__version__ = "0.1.0"

__all__ = [
    "authtoken",
    "bangumi",
    "checksum",
    "imagesize",
    "lock",
    "mapping",
    "network",
    "paths",
    "scanner",
    "searchindex",
    "subtitles",
    "tasktypes",
    "youtrans",
]