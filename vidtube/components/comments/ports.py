from datetime import datetime
from typing import Protocol
from uuid import UUID

from vidtube.domain.entities import Comment, Video
from vidtube.domain.views import CommentView


class CommentRepoPort(Protocol):
    def save(self, comment: Comment) -> Comment: ...
    def get_by_id(self, comment_id: UUID) -> Comment | None: ...
    def get_view(self, comment_id: UUID) -> CommentView | None: ...
    def list_for_video(self, video_id: UUID) -> list[CommentView]:
        """Comments on the video with owner summary, oldest first."""
        ...
    def delete(self, comment_id: UUID) -> None: ...


class VideoLookupPort(Protocol):
    def get_by_id(self, video_id: UUID) -> Video | None: ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
