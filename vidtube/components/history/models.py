"""
Watch history input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from vidtube.domain.entities import ErrorCode, User, WatchEntry
from vidtube.domain.views import HistoryItem

DEFAULT_RETENTION_DAYS = 3


@dataclass(frozen=True)
class RecordViewInput:
    user_id: UUID
    video_id: UUID


@dataclass(frozen=True)
class ListHistoryInput:
    user: User
    retention_days: int = DEFAULT_RETENTION_DAYS


@dataclass(frozen=True)
class ClearHistoryInput:
    user: User


@dataclass(frozen=True)
class RemoveFromHistoryInput:
    user: User
    video_id: str


@dataclass
class RecordViewOutput:
    entry: WatchEntry | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class HistoryListOutput:
    items: list[HistoryItem] = field(default_factory=list)
    expired: int = 0
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class HistoryChangeOutput:
    removed: int = 0
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
