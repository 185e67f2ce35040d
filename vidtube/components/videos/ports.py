from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import Video
from vidtube.domain.views import VideoCard, VideoDetail


class VideoRepoPort(Protocol):
    def save(self, video: Video) -> Video: ...
    def get_by_id(self, video_id: UUID) -> Video | None: ...
    def get_detail(self, video_id: UUID) -> VideoDetail | None: ...
    def list_published(
        self,
        query: str | None = None,
        owner_id: UUID | None = None,
        sort_by: str = "createdAt",
        sort_type: str = "desc",
        limit: int = 12,
        offset: int = 0,
    ) -> tuple[list[VideoCard], int]: ...
    def increment_views(self, video_id: UUID) -> None: ...
    def delete(self, video_id: UUID) -> None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
