from datetime import UTC, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
LikeTarget = Literal["video", "comment", "tweet"]
SortType = Literal["asc", "desc"]
ErrorCode = Literal["invalid", "unauthorized", "forbidden", "not_found", "conflict", "storage"]


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Users & Channels ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_name: str
    email: str
    full_name: str
    password_hash: str
    avatar: str
    cover_image: str = ""
    refresh_token: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Subscription(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    subscriber_id: UUID
    channel_id: UUID
    created_at: datetime = Field(default_factory=utcnow)


# --- Videos ---

class Video(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    title: str
    description: str = ""
    video_file: str
    thumbnail: str
    duration: float = 0.0
    views: int = 0
    is_published: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class WatchEntry(BaseModel):
    user_id: UUID
    video_id: UUID
    watched_at: datetime = Field(default_factory=utcnow)


# --- Social ---

class Comment(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    video_id: UUID
    owner_id: UUID
    content: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Tweet(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    content: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Like(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    liked_by: UUID
    target_type: LikeTarget
    target_id: UUID
    created_at: datetime = Field(default_factory=utcnow)


class Playlist(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    owner_id: UUID
    name: str
    description: str = ""
    video_ids: list[UUID] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# --- Media ---

class StoredMedia(BaseModel):
    key: str
    url: str
    content_type: str
    size_bytes: int
