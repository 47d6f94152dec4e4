"""Bangumi subject lookup used to fill in entity information."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

API_BASE = "https://api.bgm.tv"
USER_AGENT = "YouVideo"

_log = logging.getLogger(__name__)


@dataclass
class SearchObjectOption:
    """Optional filters for a subject search."""

    type: str = ""
    response_group: str = ""


@dataclass
class SearchMovieResult:
    """A movie found by an information source."""

    name: str = ""
    cover: str = ""
    summary: str = ""


@dataclass
class SearchTVResult:
    """A TV show found by an information source."""

    name: str = ""
    cover: str = ""
    summary: str = ""


_ANIME_SEARCH = SearchObjectOption(type="2", response_group="large")


class BangumiClient:
    """Minimal client for the Bangumi HTTP API."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = API_BASE,
        timeout: float | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        response = self.session.get(
            f"{self.base_url}/{path}", params=params or None, timeout=self.timeout
        )
        # Only successful responses carry a result; anything else reads as empty.
        if not 200 <= response.status_code < 300 or not response.content:
            return {}
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("unexpected response body from bangumi")
        return data

    def search_subject(
        self, keyword: str, option: SearchObjectOption | None = None
    ) -> dict[str, Any]:
        """Search subjects by ``keyword`` and return the decoded response."""
        params: dict[str, str] = {}
        if option is not None:
            if option.response_group:
                params["responseGroup"] = option.response_group
            if option.type:
                params["type"] = option.type
        return self._get(f"search/subject/{keyword}", params)

    def get_subject_by_id(self, subject_id: str) -> dict[str, Any]:
        """Fetch the full record of one subject."""
        return self._get(f"v0/subjects/{subject_id}")


def _items(result: dict[str, Any]) -> list[dict[str, Any]]:
    return [item for item in result.get("list") or [] if isinstance(item, dict)]


def _large_image(item: dict[str, Any]) -> str:
    return (item.get("images") or {}).get("large") or ""


def _first_hit(result: dict[str, Any]) -> dict[str, Any] | None:
    items = _items(result)
    if (result.get("results") or 0) > 0 and items:
        return items[0]
    return None


class BangumiInfoSource:
    """Information source backed by Bangumi anime subjects."""

    def __init__(self, client: BangumiClient | None = None) -> None:
        self.client = client if client is not None else BangumiClient()

    def _search(self, query: str) -> dict[str, Any]:
        return self.client.search_subject(query, _ANIME_SEARCH)

    def search_movie(self, query: str) -> SearchMovieResult | None:
        """Return the best match for ``query``, or None."""
        hit = _first_hit(self._search(query))
        if hit is None:
            return None
        return SearchMovieResult(
            name=hit.get("name") or "",
            cover=_large_image(hit),
            summary=hit.get("summary") or "",
        )

    def search_movie_list(self, query: str) -> list[SearchMovieResult]:
        """Return every match for ``query``."""
        return [
            SearchMovieResult(
                name=item.get("name") or "",
                cover=_large_image(item),
                summary=item.get("summary") or "",
            )
            for item in _items(self._search(query))
        ]

    def search_tv(self, query: str) -> SearchTVResult | None:
        """Return the best TV match for ``query``, or None."""
        hit = _first_hit(self._search(query))
        if hit is None:
            return None
        return SearchTVResult(
            name=hit.get("name") or "",
            cover=_large_image(hit),
            summary=hit.get("summary") or "",
        )

    def search_tv_list(self, query: str) -> list[SearchTVResult]:
        """Return every TV match for ``query``."""
        return [
            SearchTVResult(
                name=item.get("name") or "",
                cover=_large_image(item),
                summary=item.get("summary") or "",
            )
            for item in _items(self._search(query))
        ]

    def match_entity(self, entity: Any) -> None:
        """Fill ``entity.cover`` and ``entity.summary`` from the best match by name."""
        result = self.search_movie(entity.name)
        if result is not None:
            _log.info("matched entity %s", entity.name)
            entity.cover = result.cover
            entity.summary = result.summary

    def subject_tags(self, subject: dict[str, Any]) -> list[tuple[str, str]]:
        """Return ``(name, value)`` tag pairs for a subject record.

        Each subject tag becomes ``("Tag", name)``; each infobox entry whose
        value is a plain string becomes ``(key, value)``.
        """
        tags = [
            ("Tag", tag.get("name") or "")
            for tag in subject.get("tags") or []
            if isinstance(tag, dict)
        ]
        tags.extend(
            (box.get("key") or "", box["value"])
            for box in subject.get("infobox") or []
            if isinstance(box, dict) and isinstance(box.get("value"), str)
        )
        return tags