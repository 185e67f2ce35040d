from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.components.media import UploadedFile
from vidtube.domain.entities import ErrorCode, User, Video
from vidtube.domain.views import VideoCard, VideoDetail


@dataclass(frozen=True)
class ListingPolicy:
    """Pagination and sorting limits for public video listings."""

    default_limit: int = 12
    max_limit: int = 100
    sortable_fields: tuple[str, ...] = ("createdAt", "views", "duration", "title")
    default_sort_by: str = "createdAt"
    default_sort_type: str = "desc"


@dataclass(frozen=True)
class ListVideosInput:
    page: int = 1
    limit: int | None = None
    query: str | None = None
    sort_by: str | None = None
    sort_type: str | None = None
    user_id: str | None = None


@dataclass(frozen=True)
class PublishVideoInput:
    owner: User
    title: str | None
    description: str = ""
    is_published: bool = False
    duration: float = 0.0
    video_file: UploadedFile | None = None
    thumbnail: UploadedFile | None = None


@dataclass(frozen=True)
class GetVideoInput:
    viewer: User
    video_id: str


@dataclass(frozen=True)
class UpdateVideoInput:
    user: User
    video_id: str
    title: str | None = None
    description: str | None = None
    is_published: bool | None = None
    thumbnail: UploadedFile | None = None


@dataclass(frozen=True)
class DeleteVideoInput:
    user: User
    video_id: str


@dataclass(frozen=True)
class TogglePublishInput:
    user: User
    video_id: str
    is_published: bool | None = None


@dataclass
class VideoPageOutput:
    videos: list[VideoCard] = field(default_factory=list)
    count: int = 0
    page: int = 1
    limit: int = 0
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class VideoOutput:
    video: Video | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class VideoDetailOutput:
    video: VideoDetail | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
