"""Client for the transcoding service that runs conversion tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests


def _as_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object from the transcoding service")
    return data


@dataclass
class CreateTaskRequestBody:
    """Request to transcode ``input`` into ``output``."""

    input: str = ""
    output: str = ""
    format: str = ""
    codec: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form of this request."""
        return {
            "input": self.input,
            "output": self.output,
            "format": self.format,
            "codec": self.codec,
        }


@dataclass
class TaskResponse:
    """State of one transcoding task."""

    id: str = ""
    process: float = 0.0
    input: str = ""
    output: str = ""
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> TaskResponse:
        """Build a task from its decoded JSON form."""
        obj = _as_object(data)
        return cls(
            id=obj.get("id") or "",
            process=float(obj.get("process") or 0.0),
            input=obj.get("input") or "",
            output=obj.get("output") or "",
            status=obj.get("status") or "",
        )


@dataclass
class TaskListResponse:
    """All tasks known to the transcoding service."""

    tasks: list[TaskResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> TaskListResponse:
        """Build a task list from its decoded JSON form."""
        obj = _as_object(data)
        return cls(tasks=[TaskResponse.from_dict(item) for item in obj.get("list") or []])


@dataclass
class InfoResponse:
    """Identity of the transcoding service."""

    success: bool = False
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> InfoResponse:
        """Build service info from its decoded JSON form."""
        obj = _as_object(data)
        return cls(success=bool(obj.get("success")), name=obj.get("name") or "")


class YouTransClient:
    """HTTP client for the transcoding service at ``base_url``."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get_url(self, path: str) -> str:
        """Return the full URL of ``path`` on the service."""
        return f"{self.base_url}/{path}"

    def _post(self, path: str, data: dict[str, Any]) -> Any:
        response = self.session.post(self.get_url(path), json=data, timeout=self.timeout)
        return response.json()

    def _get(self, path: str) -> Any:
        response = self.session.get(self.get_url(path), timeout=self.timeout)
        return response.json()

    def create_new_task(self, body: CreateTaskRequestBody) -> TaskResponse:
        """Start a transcoding task and return its initial state.

        Raises ``requests.RequestException`` on transport failure and
        ``ValueError`` when the reply is not a JSON object.
        """
        return TaskResponse.from_dict(self._post("tasks", body.to_dict()))

    def get_task_list(self) -> TaskListResponse:
        """Return every task the service knows about."""
        return TaskListResponse.from_dict(self._get("/tasks"))

    def get_info(self) -> InfoResponse:
        """Return the service's identity."""
        return InfoResponse.from_dict(self._get("/info"))