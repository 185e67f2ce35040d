from __future__ import annotations

from dataclasses import dataclass, field

from vidtube.domain.entities import ErrorCode, User
from vidtube.domain.views import ChannelCard


@dataclass(frozen=True)
class ToggleSubscriptionInput:
    user: User
    channel_id: str


@dataclass(frozen=True)
class SubscriptionStatusInput:
    user: User
    channel_id: str


@dataclass(frozen=True)
class ChannelSubscribersInput:
    channel_id: str


@dataclass(frozen=True)
class SubscribedChannelsInput:
    subscriber_id: str


@dataclass
class SubscriptionStatusOutput:
    is_subscribed: bool = False
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None


@dataclass
class ChannelListOutput:
    channels: list[ChannelCard] = field(default_factory=list)
    success: bool = False
    error: str | None = None
    error_code: ErrorCode | None = None
