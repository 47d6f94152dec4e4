"""Kinds of background task and their display names."""

from __future__ import annotations

from enum import IntEnum


class TaskType(IntEnum):
    """Kind of a background task."""

    SCAN_LIBRARY = 1
    META = 2
    REMOVE = 3
    MATCH_ENTITY = 4
    SYNC_INDEX = 5
    SCAN_VIDEO_FILE = 6
    REMOVE_NOT_EXIST_VIDEO = 7
    CREATE_VIDEO = 8
    MD5 = 9
    GENERATE_COVER = 10
    ANALYZE_FILE_META = 11
    NSFW_CHECK = 12
    PARSE_ENTITY_META = 13

    @property
    def label(self) -> str:
        """Display name of this task type."""
        return TASK_TYPE_NAMES[self]


TASK_TYPE_NAMES: dict[TaskType, str] = {
    TaskType.SCAN_LIBRARY: "ScanLibrary",
    TaskType.META: "Meta",
    TaskType.REMOVE: "RemoveLibrary",
    TaskType.MATCH_ENTITY: "MatchEntity",
    TaskType.SYNC_INDEX: "SyncIndex",
    TaskType.SCAN_VIDEO_FILE: "ScanVideoFile",
    TaskType.REMOVE_NOT_EXIST_VIDEO: "RemoveNotExistVideo",
    TaskType.CREATE_VIDEO: "CreateVideo",
    TaskType.MD5: "MD5",
    TaskType.GENERATE_COVER: "GenerateCover",
    TaskType.ANALYZE_FILE_META: "AnalyzeFileMeta",
    TaskType.NSFW_CHECK: "NSFWCheck",
    TaskType.PARSE_ENTITY_META: "ParseEntityMeta",
}


def task_type_name(task_type: int) -> str:
    """Return the display name for ``task_type``, or ``""`` if it is unknown."""
    return TASK_TYPE_NAMES.get(task_type, "")