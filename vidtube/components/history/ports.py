from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import WatchEntry
from vidtube.domain.views import HistoryItem


class WatchHistoryRepoPort(Protocol):
    def record(self, entry: WatchEntry) -> WatchEntry:
        """Insert the entry, replacing any existing one for the same (user, video)."""
        ...

    def prune_older_than(self, user_id: UUID, cutoff: datetime) -> int:
        """Delete the user's entries watched strictly before cutoff. Returns count."""
        ...

    def list_for_user(self, user_id: UUID) -> list[HistoryItem]:
        """Entries joined with their video card, newest first."""
        ...

    def clear(self, user_id: UUID) -> int: ...

    def remove(self, user_id: UUID, video_id: UUID) -> int: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
