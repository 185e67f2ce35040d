from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; readable from domain objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Envelope ---
class ApiResponse(CamelModel, Generic[T]):
    status_code: int = 200
    data: T
    message: str = "Success"
    success: bool = True


class ApiError(CamelModel):
    status_code: int
    data: None = None
    message: str
    success: bool = False
    errors: list[Any] = []


# --- Users & Channels ---
class OwnerResponse(CamelModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str


class ChannelCardResponse(OwnerResponse):
    subscribers_count: int = 0


class VideoOwnerResponse(OwnerResponse):
    subscribers: int = 0


class UserResponse(CamelModel):
    id: UUID
    user_name: str
    email: str
    full_name: str
    avatar: str
    cover_image: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    user: UserResponse
    access_token: str
    refresh_token: str


class TokenPairResponse(CamelModel):
    access_token: str
    refresh_token: str


class ChannelProfileResponse(CamelModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str
    cover_image: str
    subscriber_count: int
    subscribed_to_count: int
    is_subscribed: bool


class SubscriptionStatusResponse(CamelModel):
    is_subscribed: bool


# --- Videos ---
class VideoResponse(CamelModel):
    id: UUID
    owner_id: UUID
    title: str
    description: str
    video_file: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    updated_at: datetime


class VideoCardResponse(VideoResponse):
    owner: OwnerResponse | None = None


class VideoSummaryResponse(CamelModel):
    """Card for collections (playlists, liked videos) that omits the media file."""

    id: UUID
    owner_id: UUID
    title: str
    description: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    created_at: datetime
    updated_at: datetime
    owner: OwnerResponse | None = None


class VideoDetailResponse(VideoResponse):
    owner: VideoOwnerResponse | None = None
    likes: int = 0


class VideoPageResponse(CamelModel):
    count: int
    page: int
    limit: int
    videos: list[VideoCardResponse]


class HistoryItemResponse(CamelModel):
    video: VideoCardResponse
    watched_at: datetime


# --- Social ---
class CommentResponse(CamelModel):
    id: UUID
    video_id: UUID
    owner_id: UUID
    content: str
    owner: OwnerResponse | None = None
    created_at: datetime
    updated_at: datetime


class TweetResponse(CamelModel):
    id: UUID
    owner_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime


class TweetViewResponse(TweetResponse):
    owner: OwnerResponse | None = None
    likes_count: int = 0


class LikeToggleResponse(CamelModel):
    is_liked: bool


class LikeInfoResponse(CamelModel):
    total_likes: int
    is_liked: bool


# --- Playlists ---
class PlaylistResponse(CamelModel):
    id: UUID
    owner_id: UUID
    name: str
    description: str
    video_ids: list[UUID] = []
    created_at: datetime
    updated_at: datetime


class PlaylistSummaryResponse(PlaylistResponse):
    total_videos: int = 0


class PlaylistDetailResponse(CamelModel):
    id: UUID
    name: str
    description: str
    owner: OwnerResponse | None = None
    videos: list[VideoSummaryResponse] = []
    total_videos: int = 0
    created_at: datetime
    updated_at: datetime


# --- Dashboard ---
class ChannelStatsResponse(CamelModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str
    cover_image: str
    subscribers_count: int
    videos_count: int
    total_views: int
    total_likes: int
    tweets_count: int
    playlists_count: int


class ChannelVideoResponse(CamelModel):
    id: UUID
    owner_id: UUID
    title: str
    description: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime


# --- Requests ---
class LoginRequest(CamelModel):
    user_name: str | None = None
    email: str | None = None
    password: str | None = None


class RefreshRequest(CamelModel):
    refresh_token: str | None = None


class ChangePasswordRequest(CamelModel):
    old_password: str | None = None
    new_password: str | None = None


class UpdateAccountRequest(CamelModel):
    full_name: str | None = None
    email: str | None = None


class TogglePublishRequest(CamelModel):
    is_published: bool | None = None


class ContentRequest(CamelModel):
    content: str | None = None


class PlaylistCreateRequest(CamelModel):
    name: str | None = None
    description: str | None = None


class PlaylistUpdateRequest(CamelModel):
    name: str | None = None
    description: str | None = None
