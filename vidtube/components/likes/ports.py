from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from vidtube.domain.entities import Like, LikeTarget
from vidtube.domain.views import VideoCard


class LikeRepoPort(Protocol):
    def get(self, liked_by: UUID, target_type: LikeTarget, target_id: UUID) -> Like | None: ...
    def save(self, like: Like) -> Like: ...
    def delete(self, like_id: UUID) -> None: ...
    def count(self, target_type: LikeTarget, target_id: UUID) -> int: ...
    def list_liked_videos(self, user_id: UUID) -> list[VideoCard]:
        """Videos the user liked and may still view, most recent like first."""
        ...


class TargetLookupPort(Protocol):
    """Any repository that can tell whether a likeable target exists."""

    def get_by_id(self, target_id: UUID) -> Any | None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
