"""
Read models assembled by the SQLite adapters.

These are the joined/aggregated shapes returned to callers: entities
enriched with their owner summary and with counts computed across
collections (subscribers, likes, comments, views).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from vidtube.domain.entities import Comment, Playlist, Tweet, Video


class OwnerSummary(BaseModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str


class ChannelCard(OwnerSummary):
    subscribers_count: int = 0


class VideoOwner(OwnerSummary):
    subscribers: int = 0


class ChannelProfile(BaseModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str
    cover_image: str
    subscriber_count: int = 0
    subscribed_to_count: int = 0
    is_subscribed: bool = False


class VideoCard(Video):
    owner: OwnerSummary | None = None


class VideoDetail(Video):
    owner: VideoOwner | None = None
    likes: int = 0


class HistoryItem(BaseModel):
    video: VideoCard
    watched_at: datetime


class CommentView(Comment):
    owner: OwnerSummary | None = None


class TweetView(Tweet):
    owner: OwnerSummary | None = None
    likes_count: int = 0


class PlaylistSummary(Playlist):
    total_videos: int = 0


class PlaylistDetail(BaseModel):
    id: UUID
    name: str
    description: str
    owner: OwnerSummary | None = None
    videos: list[VideoCard] = Field(default_factory=list)
    total_videos: int = 0
    created_at: datetime
    updated_at: datetime


class LikeInfo(BaseModel):
    total_likes: int = 0
    is_liked: bool = False


class ChannelStats(BaseModel):
    id: UUID
    user_name: str
    full_name: str
    avatar: str
    cover_image: str
    subscribers_count: int = 0
    videos_count: int = 0
    total_views: int = 0
    total_likes: int = 0
    tweets_count: int = 0
    playlists_count: int = 0


class ChannelVideo(BaseModel):
    id: UUID
    owner_id: UUID
    title: str
    description: str
    thumbnail: str
    duration: float
    views: int
    is_published: bool
    likes_count: int = 0
    comments_count: int = 0
    created_at: datetime
    updated_at: datetime
