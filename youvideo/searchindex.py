"""Index definitions and bookkeeping for the full-text search engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SearchIndex:
    """Definition of one search index."""

    name: str
    searchable_fields: tuple[str, ...] = field(default_factory=tuple)
    filterable_fields: tuple[str, ...] = field(default_factory=tuple)
    primary_key: str = "id"


VIDEOS_INDEX = SearchIndex(
    name="videos",
    searchable_fields=("name",),
    filterable_fields=("libraryId",),
    primary_key="id",
)
ENTITY_INDEX = SearchIndex(
    name="entity",
    searchable_fields=("name", "summary"),
    filterable_fields=("libraryId",),
    primary_key="id",
)
INDEXES = (VIDEOS_INDEX, ENTITY_INDEX)


@dataclass
class VideoDoc:
    """Search document for a video."""

    id: int
    name: str
    library_id: int

    def to_dict(self) -> dict[str, Any]:
        """Return the document as sent to the search engine."""
        return {"id": self.id, "name": self.name, "libraryId": self.library_id}


@dataclass
class EntityDoc:
    """Search document for an entity."""

    id: int
    name: str
    library_id: int
    summary: str

    def to_dict(self) -> dict[str, Any]:
        """Return the document as sent to the search engine."""
        return {
            "id": self.id,
            "name": self.name,
            "libraryId": self.library_id,
            "summary": self.summary,
        }


def find_missing_indexes(
    response: Mapping[str, Any], indexes: Iterable[SearchIndex] = INDEXES
) -> list[SearchIndex]:
    """Return the indexes absent from an index-listing ``response``.

    Raises ``KeyError`` when the response has no ``results`` and
    ``TypeError`` when ``results`` is not a list.
    """
    if "results" not in response:
        raise KeyError("key 'results' not found in meilisearch response")
    results = response["results"]
    if not isinstance(results, list):
        raise TypeError("meilisearch 'results' is not a slice")
    existing = {
        entry["uid"]
        for entry in results
        if isinstance(entry, dict) and isinstance(entry.get("uid"), str)
    }
    return [index for index in indexes if index.name not in existing]


def library_filter(library_id: int) -> str:
    """Return the filter expression selecting one library's documents."""
    return f"libraryId = {library_id}"


def library_filters(library_ids: Iterable[int]) -> list[str]:
    """Return one filter per library, to be combined with OR."""
    return [library_filter(library_id) for library_id in library_ids]


def _hit_id(hit: Mapping[str, Any]) -> float:
    return float(hit["id"])


def stale_document_ids(
    hits: Sequence[Mapping[str, Any]], current_ids: Iterable[int]
) -> list[str]:
    """Return the ids of indexed documents no longer in ``current_ids``.

    Ids are rendered as fixed-point decimals, the form used when deleting
    documents during a library sync.
    """
    current = set(current_ids)
    return [
        f"{doc_id:f}"
        for doc_id in map(_hit_id, hits)
        if int(doc_id) not in current
    ]


def hit_ids(hits: Sequence[Mapping[str, Any]]) -> list[int]:
    """Return the integer ids of search hits, in order."""
    return [int(_hit_id(hit)) for hit in hits]