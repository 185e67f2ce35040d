from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, User
from vidtube.domain.views import ChannelStats, ChannelVideo


@dataclass(frozen=True)
class ChannelStatsInput:
    user: User


@dataclass(frozen=True)
class ChannelVideosInput:
    user: User


@dataclass
class ChannelStatsOutput:
    stats: ChannelStats | None = None
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class ChannelVideosOutput:
    videos: list[ChannelVideo] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
