from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, LikeTarget, User
from vidtube.domain.views import LikeInfo, VideoCard


@dataclass(frozen=True)
class ToggleLikeInput:
    user: User
    target_type: LikeTarget
    target_id: str


@dataclass(frozen=True)
class LikeInfoInput:
    viewer: User
    target_type: LikeTarget
    target_id: str


@dataclass(frozen=True)
class LikedVideosInput:
    user: User


@dataclass
class ToggleLikeOutput:
    is_liked: bool = False
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class LikeInfoOutput:
    info: LikeInfo | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class LikedVideosOutput:
    videos: list[VideoCard] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
